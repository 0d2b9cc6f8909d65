import pytest

from postdeck.infrastructure.database import DatabaseEngine, BaseModel
from postdeck.domain.models import Tenant, UserRole, InvitationStatus
from postdeck.domain.repositories import RepositoryRegistry
from postdeck.utils.helpers.token_helper import generate_uuid_token, get_expires_at
from postdeck.core.exceptions import DatabaseValidationError, DatabaseResourceNotFoundError


@pytest.fixture
def engine(db_config):
    engine = DatabaseEngine(db_config)
    engine.start()
    engine.create_tables(BaseModel.metadata)
    yield engine
    engine.stop()


@pytest.fixture
def repos():
    return RepositoryRegistry()


def _user_data(tenant_id, email="owner@acme.example.com", **overrides):
    data = {
        "email": email,
        "password_hash": "x",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "tenant_id": tenant_id,
        "role": UserRole.ADMIN,
        "is_verified": True,
    }
    data.update(overrides)
    return data


def test_registry_exposes_repositories(repos):
    assert repos.tenant_repository.model is Tenant
    assert repos.user_repository.model_name == "User"
    assert repos.user_invitation_repository.model_name == "UserInvitation"


def test_create_assigns_prefixed_id(engine, repos):
    with engine.session_context() as session:
        tenant = repos.tenant_repository.create(session, name="Acme", subdomain="acme")

    assert tenant.id.startswith("TEN-")
    with engine.session_context(read_only=True) as session:
        assert repos.tenant_repository.get(session, tenant.id).subdomain == "acme"


def test_get_missing_returns_none(engine, repos):
    with engine.session_context(read_only=True) as session:
        assert repos.tenant_repository.get(session, "TEN-0000000000000000") is None


def test_get_or_raise(engine, repos):
    with pytest.raises(DatabaseResourceNotFoundError) as exc:
        with engine.session_context(read_only=True) as session:
            repos.tenant_repository.get_or_raise(session, "TEN-0000000000000000")

    assert exc.value.status_code == 404
    assert exc.value.error_details == {"resource_name": "Tenant", "resource_id": "TEN-0000000000000000"}


def test_constraint_violation_is_validation_error(engine, repos):
    with engine.session_context() as session:
        repos.tenant_repository.create(session, name="Acme", subdomain="acme")

    with pytest.raises(DatabaseValidationError) as exc:
        with engine.session_context() as session:
            repos.tenant_repository.create(session, name="Acme 2", subdomain="acme")
    assert exc.value.status_code == 400


def test_subdomain_exists(engine, repos):
    with engine.session_context() as session:
        repos.tenant_repository.create(session, name="Acme", subdomain="acme")

    with engine.session_context(read_only=True) as session:
        assert repos.tenant_repository.subdomain_exists(session, "acme") is True
        assert repos.tenant_repository.subdomain_exists(session, "other") is False


def test_user_lookups(engine, repos):
    with engine.session_context() as session:
        tenant = Tenant(name="Acme", subdomain="acme")
        session.add(tenant)
        session.flush()
        user = repos.user_repository.create(session, **_user_data(tenant.id))
        token = user.generate_verification_token()
        repos.user_repository.create(session, **_user_data(tenant.id, email="gone@acme.example.com", is_active=False))

    with engine.session_context(read_only=True) as session:
        users = repos.user_repository
        assert users.get_by_email(session, email="OWNER@acme.example.com").id == user.id
        assert users.get_by_verification_token(session, token=token).id == user.id
        assert users.get_by_email_in_tenant(session, email="owner@acme.example.com", tenant_id=tenant.id).id == user.id
        assert users.get_by_email_in_tenant(session, email="owner@acme.example.com", tenant_id="TEN-X") is None
        assert [u.email for u in users.get_active_users_by_tenant(session, tenant_id=tenant.id)] == ["owner@acme.example.com"]


def test_invitation_lookups(engine, repos):
    with engine.session_context() as session:
        tenant = Tenant(name="Acme", subdomain="acme")
        session.add(tenant)
        session.flush()
        inviter = repos.user_repository.create(session, **_user_data(tenant.id))
        invitations = repos.user_invitation_repository
        pending = invitations.create(
            session, email="new@acme.example.com", tenant_id=tenant.id, invited_by_user_id=inviter.id,
            role=UserRole.USER, token=generate_uuid_token(), status=InvitationStatus.PENDING,
            expires_at=get_expires_at(days=7),
        )
        invitations.create(
            session, email="old@acme.example.com", tenant_id=tenant.id, invited_by_user_id=inviter.id,
            role=UserRole.USER, token=generate_uuid_token(), status=InvitationStatus.REVOKED,
            expires_at=get_expires_at(days=7),
        )

    with engine.session_context(read_only=True) as session:
        invitations = repos.user_invitation_repository
        assert invitations.get_by_token(session, token=pending.token).id == pending.id
        assert invitations.get_pending_by_email(session, email="new@acme.example.com", tenant_id=tenant.id).id == pending.id
        assert invitations.get_pending_by_email(session, email="old@acme.example.com", tenant_id=tenant.id) is None
        assert [i.id for i in invitations.get_pending_by_tenant(session, tenant_id=tenant.id)] == [pending.id]
