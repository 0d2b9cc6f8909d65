import re
from sqlalchemy import Column, String, UniqueConstraint
from sqlalchemy.orm import relationship

from postdeck.infrastructure.database.models import BaseModel, TimestampMixin


class Tenant(BaseModel, TimestampMixin):
    """Organizasyon (tenant) modeli"""
    __prefix__ = "TEN"
    __tablename__ = "tenants"
    __table_args__ = (
        UniqueConstraint('subdomain', name='_tenant_subdomain_unique'),
    )

    name = Column(String(255), nullable=False,
    comment="Organizasyon adı")
    subdomain = Column(String(255), nullable=False, unique=True, index=True,
    comment="Organizasyon alt alan adı")

    users = relationship("User", back_populates="tenant")
    invitations = relationship("UserInvitation", back_populates="tenant")

    @staticmethod
    def slugify(organization_name: str) -> str:
        """'Acme Inc.' -> 'acme-inc-'"""
        return re.sub(r"[^a-z0-9]", "-", organization_name.lower())
