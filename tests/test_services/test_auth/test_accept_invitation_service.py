import pytest

from postdeck.domain.models import User, UserInvitation, UserRole, InvitationStatus
from postdeck.domain.services import AuthService
from postdeck.utils.helpers.jwt_helper import decode_access_token
from postdeck.core.exceptions.services import (
    InvitationTokenInvalidError,
    InvitationNoLongerValidError,
    InvitationExpiredError,
    InvitationEmailMismatchError,
    UserAlreadyExistsError,
)


def _accept(token, email="new@acme.example.com", **overrides):
    data = {
        "token": token,
        "email": email,
        "first_name": "Linus",
        "last_name": "Torvalds",
        "password": "Sup3rSecret!",
    }
    data.update(overrides)
    return AuthService.accept_invitation(**data)


def test_accept_invitation_creates_verified_member(make_user, make_invitation, load):
    inviter = make_user()
    invitation = make_invitation(inviter, role=UserRole.MANAGER)

    result = _accept(invitation.token)

    assert result["message"] == "Account created successfully! You are now logged in."
    member = result["data"]["user"]
    assert member["tenant_id"] == inviter.tenant_id
    assert member["role"] == "MANAGER"
    assert member["is_verified"] is True
    assert decode_access_token(result["data"]["access_token"])["sub"] == member["id"]
    assert load(UserInvitation, invitation.id).status == InvitationStatus.ACCEPTED


def test_accept_invitation_email_match_is_case_insensitive(make_user, make_invitation):
    invitation = make_invitation(make_user())
    assert _accept(invitation.token, email="NEW@Acme.example.com")["data"]["user"]["email"] == "new@acme.example.com"


def test_accept_invitation_invalid_token(db):
    with pytest.raises(InvitationTokenInvalidError) as exc:
        _accept("unknown-token")
    assert exc.value.error_message == "Invalid invitation token"


@pytest.mark.parametrize("status", [InvitationStatus.ACCEPTED, InvitationStatus.REVOKED, InvitationStatus.EXPIRED])
def test_accept_invitation_not_pending(make_user, make_invitation, status):
    invitation = make_invitation(make_user(), status=status)

    with pytest.raises(InvitationNoLongerValidError) as exc:
        _accept(invitation.token)
    assert exc.value.error_message == (
        "This invitation is no longer valid. It may have been revoked or already used."
    )


def test_accept_invitation_expired_is_persisted(make_user, make_invitation, load):
    invitation = make_invitation(make_user(), days=-1)

    with pytest.raises(InvitationExpiredError):
        _accept(invitation.token)

    assert load(UserInvitation, invitation.id).status == InvitationStatus.EXPIRED


def test_accept_invitation_email_mismatch(make_user, make_invitation, load):
    invitation = make_invitation(make_user())

    with pytest.raises(InvitationEmailMismatchError):
        _accept(invitation.token, email="someone-else@acme.example.com")
    assert load(UserInvitation, invitation.id).status == InvitationStatus.PENDING


def test_accept_invitation_existing_account(make_user, make_invitation, db):
    inviter = make_user()
    make_user(email="new@acme.example.com", role=UserRole.USER)
    invitation = make_invitation(inviter)

    with pytest.raises(UserAlreadyExistsError):
        _accept(invitation.token)

    with db.engine.session_context(read_only=True) as session:
        assert session.query(User).count() == 2
