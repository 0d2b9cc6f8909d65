from .enums import UserRole, InvitationStatus, INVITER_ROLES
from .tenant_models import Tenant
from .user_models import User, UserInvitation

__all__ = [
    "UserRole",
    "InvitationStatus",
    "INVITER_ROLES",
    "Tenant",
    "User",
    "UserInvitation",
]
