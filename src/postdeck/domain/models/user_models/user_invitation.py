from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, Index
from sqlalchemy.orm import relationship

from postdeck.infrastructure.database.models import BaseModel, TimestampMixin
from postdeck.domain.models.enums import UserRole, InvitationStatus
from postdeck.utils.helpers.token_helper import is_token_expired


class UserInvitation(BaseModel, TimestampMixin):
    """Organizasyona kullanıcı daveti"""
    __prefix__ = "INV"
    __tablename__ = "user_invitations"
    __table_args__ = (
        Index('idx_invitation_email', 'email'),
        Index('idx_invitation_status', 'status'),
        Index('idx_invitation_tenant_status', 'tenant_id', 'status'),
    )

    email = Column(String(255), nullable=False,
    comment="Davet edilen e-posta adresi")
    tenant_id = Column(String(20), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False,
    comment="Hangi organizasyona davet")
    invited_by_user_id = Column(String(20), ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    comment="Daveti gönderen kullanıcı")
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False,
    comment="Davet edilen kullanıcıya verilecek rol")

    token = Column(String(64), nullable=False, unique=True, index=True,
    comment="Benzersiz davet tokeni (URL'de kullanılır)")
    status = Column(Enum(InvitationStatus), default=InvitationStatus.PENDING, nullable=False,
    comment="PENDING, ACCEPTED, REVOKED, EXPIRED")
    expires_at = Column(DateTime(timezone=True), nullable=False,
    comment="Son kullanma tarihi (7 gün)")

    tenant = relationship("Tenant", back_populates="invitations")
    invited_by = relationship("User", foreign_keys=[invited_by_user_id])

    def is_expired(self) -> bool:
        return is_token_expired(self.expires_at)

    def is_pending(self) -> bool:
        return self.status == InvitationStatus.PENDING and not self.is_expired()

    def mark_as_expired(self) -> None:
        self.status = InvitationStatus.EXPIRED

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "role": self.role.value if self.role else None,
            "status": self.status.value if self.status else None,
            "tenant_id": self.tenant_id,
            "invited_by_user_id": self.invited_by_user_id,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
