from enum import Enum


class UserRole(str, Enum):
    """Organizasyon içindeki kullanıcı rolü"""
    ADMIN = "ADMIN"        # Organizasyonu kuran kullanıcı
    MANAGER = "MANAGER"    # Davet gönderebilir
    USER = "USER"


class InvitationStatus(str, Enum):
    """Davet durumu"""
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REVOKED = "REVOKED"
    EXPIRED = "EXPIRED"


INVITER_ROLES = (UserRole.ADMIN, UserRole.MANAGER)


__all__ = [
    "UserRole",
    "InvitationStatus",
    "INVITER_ROLES",
]
