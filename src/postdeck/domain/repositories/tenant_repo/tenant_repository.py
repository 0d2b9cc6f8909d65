from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from postdeck.infrastructure.database.repos.base import BaseRepository, handle_exceptions
from postdeck.domain.models.tenant_models.tenant import Tenant


class TenantRepository(BaseRepository[Tenant]):

    def __init__(self):
        super().__init__(Tenant)

    @handle_exceptions
    def get_by_subdomain(self, session: Session, subdomain: str) -> Optional[Tenant]:
        query = select(Tenant).where(Tenant.subdomain == subdomain)
        return session.execute(query).scalar_one_or_none()

    @handle_exceptions
    def subdomain_exists(self, session: Session, subdomain: str) -> bool:
        return self.get_by_subdomain(session, subdomain) is not None
