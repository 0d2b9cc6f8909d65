from typing import Optional, Dict, Any
from ..base import PostDeckException


class InvitationServiceException(PostDeckException):
    status_code: int = 400
    error_code: str = "INVITATION_ERROR"
    error_message: str = "Invitation error occurred"

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class InvitationPermissionDeniedError(InvitationServiceException):
    status_code = 403
    error_code = "INVITATION_PERMISSION_DENIED"
    error_message = "Only admins and managers can invite users"


class UserAlreadyInOrganizationError(InvitationServiceException):
    error_code = "USER_ALREADY_IN_ORGANIZATION"
    error_message = "User with this email is already part of your organization"

    def __init__(self, email: str, **kwargs):
        super().__init__(error_details={"email": email}, **kwargs)


class InvitationAlreadySentError(InvitationServiceException):
    error_code = "INVITATION_ALREADY_SENT"
    error_message = "An invitation has already been sent to this email"

    def __init__(self, email: str, **kwargs):
        super().__init__(error_details={"email": email}, **kwargs)


class InvitationNotFoundError(InvitationServiceException):
    status_code = 404
    error_code = "INVITATION_NOT_FOUND"
    error_message = "Invitation not found"

    def __init__(self, invitation_id: str, **kwargs):
        super().__init__(error_details={"invitation_id": invitation_id}, **kwargs)


class InvitationForbiddenError(InvitationServiceException):
    status_code = 403
    error_code = "INVITATION_FORBIDDEN"
    error_message = "You can only revoke invitations from your organization"
