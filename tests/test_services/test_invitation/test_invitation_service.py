from types import SimpleNamespace

import pytest

from postdeck.domain.models import UserInvitation, UserRole, InvitationStatus
from postdeck.domain.services import InvitationService
from postdeck.core.exceptions import MailTrapSendError
from postdeck.core.exceptions.services import (
    UserUnauthorizedError,
    InvitationPermissionDeniedError,
    UserAlreadyInOrganizationError,
    InvitationAlreadySentError,
    InvitationNotFoundError,
    InvitationForbiddenError,
)


def test_invite_user_creates_pending_invitation(make_user, mail, load):
    inviter = make_user()

    result = InvitationService.invite_user(inviter_id=inviter.id, email="new@acme.example.com", role=UserRole.MANAGER)

    assert result["message"] == "Invitation sent successfully"
    data = result["data"]
    assert data["status"] == "PENDING"
    assert data["role"] == "MANAGER"
    assert data["tenant_id"] == inviter.tenant_id

    invitation = load(UserInvitation, data["id"])
    mail.invitation.assert_called_once_with("new@acme.example.com", "Ada Lovelace", "Acme Inc", invitation.token)


def test_manager_can_invite_user_role(make_user):
    inviter = make_user(role=UserRole.MANAGER)
    result = InvitationService.invite_user(inviter_id=inviter.id, email="new@acme.example.com", role=UserRole.USER)
    assert result["data"]["role"] == "USER"


def test_invite_user_requires_inviter_role(make_user):
    member = make_user(role=UserRole.USER)

    with pytest.raises(InvitationPermissionDeniedError) as exc:
        InvitationService.invite_user(inviter_id=member.id, email="new@acme.example.com", role=UserRole.USER)
    assert exc.value.status_code == 403
    assert exc.value.error_message == "Only admins and managers can invite users"


def test_invite_user_unknown_inviter(db):
    with pytest.raises(UserUnauthorizedError):
        InvitationService.invite_user(inviter_id="USR-0000000000000000", email="new@acme.example.com", role=UserRole.USER)


def test_invite_member_of_same_tenant_rejected(make_user):
    inviter = make_user()
    make_user(email="teammate@acme.example.com", role=UserRole.USER, tenant=SimpleNamespace(id=inviter.tenant_id))

    with pytest.raises(UserAlreadyInOrganizationError):
        InvitationService.invite_user(inviter_id=inviter.id, email="TEAMMATE@acme.example.com", role=UserRole.USER)


def test_member_of_other_tenant_can_be_invited(make_user):
    inviter = make_user()
    make_user(email="member@other.example.com", role=UserRole.USER)

    result = InvitationService.invite_user(inviter_id=inviter.id, email="member@other.example.com", role=UserRole.USER)
    assert result["data"]["email"] == "member@other.example.com"


def test_duplicate_pending_invitation_rejected(make_user, make_invitation):
    inviter = make_user()
    make_invitation(inviter, email="new@acme.example.com")

    with pytest.raises(InvitationAlreadySentError):
        InvitationService.invite_user(inviter_id=inviter.id, email="new@acme.example.com", role=UserRole.USER)


def test_invite_survives_mail_failure(make_user, mail):
    mail.invitation.side_effect = MailTrapSendError(to_email="new@acme.example.com")
    inviter = make_user()

    result = InvitationService.invite_user(inviter_id=inviter.id, email="new@acme.example.com", role=UserRole.USER)
    assert result["data"]["status"] == "PENDING"


def test_list_pending_invitations(make_user, make_invitation):
    inviter = make_user()
    make_invitation(inviter, email="a@acme.example.com")
    make_invitation(inviter, email="b@acme.example.com")
    make_invitation(inviter, email="c@acme.example.com", status=InvitationStatus.REVOKED)

    pending = InvitationService.list_pending_invitations(user_id=inviter.id)

    assert sorted(item["email"] for item in pending) == ["a@acme.example.com", "b@acme.example.com"]


def test_revoke_invitation(make_user, make_invitation, load):
    inviter = make_user()
    invitation = make_invitation(inviter)

    assert InvitationService.revoke_invitation(user_id=inviter.id, invitation_id=invitation.id) is True
    assert load(UserInvitation, invitation.id).status == InvitationStatus.REVOKED


def test_revoke_invitation_not_found(make_user):
    inviter = make_user()
    with pytest.raises(InvitationNotFoundError) as exc:
        InvitationService.revoke_invitation(user_id=inviter.id, invitation_id="INV-0000000000000000")
    assert exc.value.status_code == 404


def test_revoke_invitation_other_tenant(make_user, make_invitation):
    inviter = make_user()
    outsider = make_user(email="boss@other.example.com")
    invitation = make_invitation(inviter)

    with pytest.raises(InvitationForbiddenError) as exc:
        InvitationService.revoke_invitation(user_id=outsider.id, invitation_id=invitation.id)
    assert exc.value.status_code == 403


def test_get_organization_users(make_user):
    admin = make_user()
    tenant = SimpleNamespace(id=admin.tenant_id)
    make_user(email="member@acme.example.com", role=UserRole.USER, tenant=tenant)
    make_user(email="gone@acme.example.com", role=UserRole.USER, tenant=tenant, is_active=False)

    users = InvitationService.get_organization_users(user_id=admin.id)

    assert sorted(user["email"] for user in users) == ["member@acme.example.com", "owner@acme.example.com"]
