from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from postdeck.infrastructure.database.repos.base import BaseRepository, handle_exceptions
from postdeck.domain.models.user_models.user_invitation import UserInvitation
from postdeck.domain.models.enums import InvitationStatus


class UserInvitationRepository(BaseRepository[UserInvitation]):

    def __init__(self):
        super().__init__(UserInvitation)

    @handle_exceptions
    def get_by_token(self, session: Session, token: str) -> Optional[UserInvitation]:
        query = select(UserInvitation).where(UserInvitation.token == token)
        return session.execute(query).scalar_one_or_none()

    @handle_exceptions
    def get_pending_by_email(self, session: Session, email: str, tenant_id: str) -> Optional[UserInvitation]:
        query = select(UserInvitation).where(
            func.lower(UserInvitation.email) == email.lower(),
            UserInvitation.tenant_id == tenant_id,
            UserInvitation.status == InvitationStatus.PENDING,
        )
        return session.execute(query).scalars().first()

    @handle_exceptions
    def get_pending_by_tenant(self, session: Session, tenant_id: str) -> List[UserInvitation]:
        query = (
            select(UserInvitation)
            .where(UserInvitation.tenant_id == tenant_id, UserInvitation.status == InvitationStatus.PENDING)
            .order_by(UserInvitation.created_at.desc())
        )
        return list(session.execute(query).scalars().all())
