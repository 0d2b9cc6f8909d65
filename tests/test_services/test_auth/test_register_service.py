import pytest

from postdeck.domain.models import Tenant, User, UserRole
from postdeck.domain.services import AuthService
from postdeck.core.exceptions.services import UserAlreadyExistsError
from postdeck.core.exceptions import MailTrapSendError


def _register(**overrides):
    data = {
        "email": "founder@acme.example.com",
        "password": "Sup3rSecret!",
        "first_name": "Grace",
        "last_name": "Hopper",
        "organization_name": "Acme Inc",
    }
    data.update(overrides)
    return AuthService.register(**data)


def test_register_creates_tenant_and_admin(db, mail, load):
    result = _register()

    assert result["message"] == "Registration successful! Please check your email to verify your account."
    data = result["data"]
    assert data["subdomain"] == "acme-inc"

    user = load(User, data["id"])
    assert user.role == UserRole.ADMIN
    assert user.is_verified is False
    assert user.verification_token
    assert user.password_hash != "Sup3rSecret!"
    assert load(Tenant, data["tenant_id"]).name == "Acme Inc"

    mail.verification.assert_called_once_with("founder@acme.example.com", "Grace Hopper", user.verification_token)


def test_register_duplicate_email(db, mail):
    _register()
    with pytest.raises(UserAlreadyExistsError) as exc:
        _register(organization_name="Other Org")
    assert exc.value.error_message == "User with this email already exists"


def test_register_duplicate_email_is_case_insensitive(db, mail):
    _register()
    with pytest.raises(UserAlreadyExistsError):
        _register(email="FOUNDER@acme.example.com")


def test_register_subdomain_collision_gets_suffix(db, mail):
    first = _register()
    second = _register(email="other@acme.example.com")

    assert first["data"]["subdomain"] == "acme-inc"
    assert second["data"]["subdomain"].startswith("acme-inc-")
    assert len(second["data"]["subdomain"]) == len("acme-inc-") + 4


def test_register_survives_mail_failure(db, mail, load):
    mail.verification.side_effect = MailTrapSendError(to_email="founder@acme.example.com")

    result = _register()

    assert load(User, result["data"]["id"]) is not None
