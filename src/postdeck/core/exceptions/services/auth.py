from typing import Optional, Dict, Any
from ..base import PostDeckException


class AuthServiceException(PostDeckException):
    status_code: int = 400
    error_code: str = "AUTH_ERROR"
    error_message: str = "Authentication error occurred"

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class UserAlreadyExistsError(AuthServiceException):
    status_code = 400
    error_code = "USER_ALREADY_EXISTS"
    error_message = "User with this email already exists"

    def __init__(self, email: str, **kwargs):
        super().__init__(error_details={"email": email}, **kwargs)


class InvalidCredentialsError(AuthServiceException):
    status_code = 401
    error_code = "INVALID_CREDENTIALS"
    error_message = "Invalid credentials"


class EmailNotVerifiedError(AuthServiceException):
    status_code = 401
    error_code = "EMAIL_NOT_VERIFIED"
    error_message = (
        "Please verify your email before logging in. "
        "Check your inbox for the verification link."
    )


class EmailVerificationTokenInvalidError(AuthServiceException):
    error_code = "EMAIL_VERIFICATION_TOKEN_INVALID"
    error_message = "Invalid verification token"


class EmailVerificationTokenExpiredError(AuthServiceException):
    error_code = "EMAIL_VERIFICATION_TOKEN_EXPIRED"
    error_message = "Verification token has expired. Please request a new one."


class EmailAlreadyVerifiedError(AuthServiceException):
    error_code = "EMAIL_ALREADY_VERIFIED"
    error_message = "Email is already verified"


class PasswordResetTokenInvalidError(AuthServiceException):
    error_code = "PASSWORD_RESET_TOKEN_INVALID"
    error_message = "Invalid reset token"


class PasswordResetTokenExpiredError(AuthServiceException):
    error_code = "PASSWORD_RESET_TOKEN_EXPIRED"
    error_message = "Reset token has expired. Please request a new one."


class WeakPasswordError(AuthServiceException):
    error_code = "WEAK_PASSWORD"
    error_message = "Password must be at least 8 characters long"


class UserNotFoundError(AuthServiceException):
    status_code = 404
    error_code = "USER_NOT_FOUND"
    error_message = "User not found"


class UserUnauthorizedError(AuthServiceException):
    """validate_user başarısız olduğunda; guard bunu 401'e çevirir."""

    status_code = 401
    error_code = "USER_UNAUTHORIZED"
    error_message = "User not found"


# ==============================================================
# INVITATION ACCEPTANCE
# ==============================================================

class InvitationTokenInvalidError(AuthServiceException):
    error_code = "INVITATION_TOKEN_INVALID"
    error_message = "Invalid invitation token"


class InvitationNoLongerValidError(AuthServiceException):
    error_code = "INVITATION_NO_LONGER_VALID"
    error_message = "This invitation is no longer valid. It may have been revoked or already used."

    def __init__(self, status: Optional[str] = None, **kwargs):
        super().__init__(error_details={"status": status} if status else None, **kwargs)


class InvitationExpiredError(AuthServiceException):
    error_code = "INVITATION_EXPIRED"
    error_message = "This invitation has expired. Please request a new one."


class InvitationEmailMismatchError(AuthServiceException):
    error_code = "INVITATION_EMAIL_MISMATCH"
    error_message = "Email does not match invitation"
