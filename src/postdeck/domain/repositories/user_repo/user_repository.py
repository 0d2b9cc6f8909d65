from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from postdeck.infrastructure.database.repos.base import BaseRepository, handle_exceptions
from postdeck.domain.models.user_models.user import User


class UserRepository(BaseRepository[User]):

    def __init__(self):
        super().__init__(User)

    @handle_exceptions
    def get_by_email(self, session: Session, email: str) -> Optional[User]:
        query = select(User).where(func.lower(User.email) == email.lower())
        return session.execute(query).scalar_one_or_none()

    @handle_exceptions
    def get_by_verification_token(self, session: Session, token: str) -> Optional[User]:
        query = select(User).where(User.verification_token == token)
        return session.execute(query).scalar_one_or_none()

    @handle_exceptions
    def get_by_reset_token(self, session: Session, token: str) -> Optional[User]:
        query = select(User).where(User.reset_token == token)
        return session.execute(query).scalar_one_or_none()

    @handle_exceptions
    def get_by_email_in_tenant(self, session: Session, email: str, tenant_id: str) -> Optional[User]:
        query = select(User).where(func.lower(User.email) == email.lower(), User.tenant_id == tenant_id)
        return session.execute(query).scalar_one_or_none()

    @handle_exceptions
    def get_active_users_by_tenant(self, session: Session, tenant_id: str) -> List[User]:
        query = (
            select(User)
            .where(User.tenant_id == tenant_id, User.is_active.is_(True))
            .order_by(User.created_at.asc())
        )
        return list(session.execute(query).scalars().all())
