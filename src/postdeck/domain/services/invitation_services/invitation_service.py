from typing import Dict, Any, List

from postdeck.domain.repositories import RepositoryRegistry
from postdeck.domain.models import UserRole, InvitationStatus
from postdeck.domain.services.email_services import EmailService
from postdeck.infrastructure.database import with_transaction, with_readonly_session
from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import PostDeckException
from postdeck.utils.handlers import ConfigurationHandler
from postdeck.utils.helpers.token_helper import generate_uuid_token, get_expires_at
from postdeck.core.exceptions.services import (
    UserUnauthorizedError,
    InvitationPermissionDeniedError,
    UserAlreadyInOrganizationError,
    InvitationAlreadySentError,
    InvitationNotFoundError,
    InvitationForbiddenError,
)

# logs/services/Invitation Service/service.log
logger = get_logger("Invitation Service", parent_folder="services")


class InvitationService:
    _user_repo = RepositoryRegistry().user_repository
    _tenant_repo = RepositoryRegistry().tenant_repository
    _invitation_repo = RepositoryRegistry().user_invitation_repository

    @classmethod
    def _get_inviter(cls, session, user_id: str, action: str):
        user = cls._user_repo.get(session, user_id)
        if not user:
            raise UserUnauthorizedError()

        if not user.can_invite:
            logger.warning(
                "Davet yetkisi yok",
                extra={"user_id": user_id, "role": user.role.value, "action": action}
            )
            raise InvitationPermissionDeniedError(message=f"Only admins and managers can {action}")
        return user

    @classmethod
    @with_transaction(manager=None)
    def invite_user(cls, session, *, inviter_id: str, email: str, role: UserRole) -> Dict[str, Any]:

        inviter = cls._get_inviter(session, inviter_id, "invite users")
        logger.info("Davet oluşturuluyor", extra={"inviter_id": inviter.id, "email": email, "role": UserRole(role).value})

        if cls._user_repo.get_by_email_in_tenant(session, email=email, tenant_id=inviter.tenant_id):
            logger.warning("Kullanıcı zaten organizasyonda", extra={"email": email, "tenant_id": inviter.tenant_id})
            raise UserAlreadyInOrganizationError(email=email)

        if cls._invitation_repo.get_pending_by_email(session, email=email, tenant_id=inviter.tenant_id):
            logger.warning("Bekleyen davet zaten var", extra={"email": email, "tenant_id": inviter.tenant_id})
            raise InvitationAlreadySentError(email=email)

        expire_days = ConfigurationHandler.get_value_as_int("Auth", "invitation_expire_days", fallback=7)
        invitation = cls._invitation_repo.create(
            session,
            email=email,
            tenant_id=inviter.tenant_id,
            invited_by_user_id=inviter.id,
            role=UserRole(role),
            token=generate_uuid_token(),
            status=InvitationStatus.PENDING,
            expires_at=get_expires_at(days=expire_days),
        )

        tenant = cls._tenant_repo.get_or_raise(session, inviter.tenant_id)
        try:
            EmailService.send_invitation_email(email, inviter.full_name, tenant.name, invitation.token)
        except PostDeckException as e:
            logger.error(
                "Davet e-postası gönderilemedi",
                extra={"invitation_id": invitation.id, "email": email, "error_code": e.error_code}
            )

        logger.info("Davet oluşturuldu", extra={"invitation_id": invitation.id, "tenant_id": inviter.tenant_id})

        return {
            "message": "Invitation sent successfully",
            "data": invitation.to_dict()
        }

    @classmethod
    @with_readonly_session(manager=None)
    def list_pending_invitations(cls, session, *, user_id: str) -> List[Dict[str, Any]]:
        user = cls._get_inviter(session, user_id, "view invitations")
        invitations = cls._invitation_repo.get_pending_by_tenant(session, tenant_id=user.tenant_id)
        return [invitation.to_dict() for invitation in invitations]

    @classmethod
    @with_transaction(manager=None)
    def revoke_invitation(cls, session, *, user_id: str, invitation_id: str) -> bool:
        user = cls._get_inviter(session, user_id, "revoke invitations")

        invitation = cls._invitation_repo.get(session, invitation_id)
        if not invitation:
            raise InvitationNotFoundError(invitation_id=invitation_id)

        if invitation.tenant_id != user.tenant_id:
            logger.warning(
                "Başka organizasyonun davetini iptal etme denemesi",
                extra={"user_id": user.id, "invitation_id": invitation_id}
            )
            raise InvitationForbiddenError()

        invitation.status = InvitationStatus.REVOKED
        session.flush()

        logger.info("Davet iptal edildi", extra={"user_id": user.id, "invitation_id": invitation_id})
        return True

    @classmethod
    @with_readonly_session(manager=None)
    def get_organization_users(cls, session, *, user_id: str) -> List[Dict[str, Any]]:
        user = cls._user_repo.get(session, user_id)
        if not user:
            raise UserUnauthorizedError()
        return [member.to_dict() for member in cls._user_repo.get_active_users_by_tenant(session, tenant_id=user.tenant_id)]
