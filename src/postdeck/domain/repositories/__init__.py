from .user_repo import UserRepository, UserInvitationRepository
from .tenant_repo import TenantRepository


class RepositoryRegistry:
    @property
    def user_repository(self):
        return UserRepository()

    @property
    def user_invitation_repository(self):
        return UserInvitationRepository()

    @property
    def tenant_repository(self):
        return TenantRepository()


__all__ = [
    "RepositoryRegistry",
    "UserRepository",
    "UserInvitationRepository",
    "TenantRepository",
]
