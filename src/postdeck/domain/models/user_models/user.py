from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey, Enum, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from postdeck.infrastructure.database.models import BaseModel, TimestampMixin
from postdeck.domain.models.enums import UserRole, INVITER_ROLES
from postdeck.utils.helpers.token_helper import generate_uuid_token, get_expires_at


class User(BaseModel, TimestampMixin):
    __prefix__ = "USR"
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint('email', name='_user_email_unique'),
        Index('idx_user_tenant', 'tenant_id'),
    )

    # ---- User Authentication Information ---- #
    email = Column(String(255), nullable=False, unique=True, index=True,
    comment="E-posta adresi")
    password_hash = Column(String(255), nullable=False,
    comment="bcrypt ile hashlenmiş şifre")

    # ---- User Information ---- #
    first_name = Column(String(100), nullable=False,
    comment="Kullanıcı adı")
    last_name = Column(String(100), nullable=False,
    comment="Kullanıcı soyadı")

    # ---- User Status ---- #
    is_verified = Column(Boolean, default=False, nullable=False,
    comment="E-posta doğrulanmış mı?")
    is_active = Column(Boolean, default=True, nullable=False,
    comment="Hesap aktif mi?")

    # ---- Tokens ---- #
    verification_token = Column(String(64), nullable=True, index=True,
    comment="E-posta doğrulama tokeni")
    verification_token_expiry = Column(DateTime(timezone=True), nullable=True,
    comment="E-posta doğrulama tokeni son kullanma tarihi")
    reset_token = Column(String(64), nullable=True, index=True,
    comment="Şifre sıfırlama tokeni")
    reset_token_expiry = Column(DateTime(timezone=True), nullable=True,
    comment="Şifre sıfırlama tokeni son kullanma tarihi")

    # ---- Organization ---- #
    tenant_id = Column(String(20), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False,
    comment="Kullanıcının organizasyonu")
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False,
    comment="Organizasyon içindeki rol")

    tenant = relationship("Tenant", back_populates="users")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def can_invite(self) -> bool:
        return self.role in INVITER_ROLES

    def generate_verification_token(self, hours: int = 24) -> str:
        self.verification_token = generate_uuid_token()
        self.verification_token_expiry = get_expires_at(hours=hours)
        return self.verification_token

    def generate_reset_token(self, hours: int = 1) -> str:
        self.reset_token = generate_uuid_token()
        self.reset_token_expiry = get_expires_at(hours=hours)
        return self.reset_token

    def mark_as_verified(self) -> None:
        self.is_verified = True
        self.verification_token = None
        self.verification_token_expiry = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value if self.role else None,
            "tenant_id": self.tenant_id,
            "is_verified": self.is_verified,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
