from .auth_services import AuthService
from .email_services import EmailService
from .invitation_services import InvitationService
from .upload_services import UploadService, IncomingFile, validate_files

__all__ = [
    "AuthService",
    "EmailService",
    "InvitationService",
    "UploadService",
    "IncomingFile",
    "validate_files",
]
