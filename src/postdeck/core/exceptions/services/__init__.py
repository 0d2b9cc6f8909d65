from .auth import (
    AuthServiceException,
    UserAlreadyExistsError,
    InvalidCredentialsError,
    EmailNotVerifiedError,
    EmailVerificationTokenInvalidError,
    EmailVerificationTokenExpiredError,
    EmailAlreadyVerifiedError,
    PasswordResetTokenInvalidError,
    PasswordResetTokenExpiredError,
    WeakPasswordError,
    UserNotFoundError,
    UserUnauthorizedError,
    InvitationTokenInvalidError,
    InvitationNoLongerValidError,
    InvitationExpiredError,
    InvitationEmailMismatchError,
)
from .invitation import (
    InvitationServiceException,
    InvitationPermissionDeniedError,
    UserAlreadyInOrganizationError,
    InvitationAlreadySentError,
    InvitationNotFoundError,
    InvitationForbiddenError,
)
from .upload import (
    UploadServiceException,
    FileRequiredError,
    InvalidFileTypeError,
    FileTooLargeError,
    TooManyFilesError,
    ChunkUploadNotFoundError,
    ChunkUploadInvalidError,
    ChunkUploadIncompleteError,
)
