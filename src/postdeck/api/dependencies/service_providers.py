from functools import lru_cache
from postdeck.domain.services import AuthService, InvitationService, UploadService


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    return AuthService()

@lru_cache(maxsize=1)
def get_invitation_service() -> InvitationService:
    return InvitationService()

@lru_cache(maxsize=1)
def get_upload_service() -> UploadService:
    return UploadService()
