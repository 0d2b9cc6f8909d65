from .user_repository import UserRepository
from .user_invitation_repository import UserInvitationRepository

__all__ = ["UserRepository", "UserInvitationRepository"]
