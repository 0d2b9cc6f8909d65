from .user import User
from .user_invitation import UserInvitation

__all__ = ["User", "UserInvitation"]
