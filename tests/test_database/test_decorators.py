import pytest
from sqlalchemy.orm import Session

from postdeck.infrastructure.database import with_session, with_transaction_session, with_readonly_session
from postdeck.domain.models import Tenant
from postdeck.core.exceptions import DatabaseDecoratorSignatureError


@with_session()
def create_tenant(name: str, subdomain: str, session: Session = None):
    tenant = Tenant(name=name, subdomain=subdomain)
    session.add(tenant)
    session.flush()
    return tenant.id


@with_transaction_session()
def atomic_create(name: str, subdomain: str, fail: bool = False, session: Session = None):
    session.add(Tenant(name=name, subdomain=subdomain))
    session.flush()
    if fail:
        raise ValueError("Simulated failure")


@with_readonly_session()
def find_tenant_name(subdomain: str, session: Session = None):
    tenant = session.query(Tenant).filter_by(subdomain=subdomain).first()
    return tenant.name if tenant else None


class TenantService:
    @classmethod
    @with_transaction_session(manager=None)
    def rename(cls, session, *, subdomain: str, name: str):
        tenant = session.query(Tenant).filter_by(subdomain=subdomain).one()
        tenant.name = name
        return tenant.id


def test_with_session_commits(manager):
    tenant_id = create_tenant("Acme", "acme")
    assert tenant_id.startswith("TEN-")
    assert find_tenant_name("acme") == "Acme"


def test_with_transaction_rollback(manager):
    with pytest.raises(ValueError):
        atomic_create("Broken", "broken", fail=True)
    assert find_tenant_name("broken") is None


def test_classmethod_service_signature(manager):
    create_tenant("Acme", "acme")
    TenantService.rename(subdomain="acme", name="Acme Inc")
    assert find_tenant_name("acme") == "Acme Inc"


def test_explicit_session_is_reused(manager):
    with manager.engine.session_context() as session:
        create_tenant("Shared", "shared", session=session)
        # Aynı session içinde flush edilmiş kayıt görünür
        assert find_tenant_name("shared", session=session) == "Shared"


def test_missing_session_parameter_rejected():
    with pytest.raises(DatabaseDecoratorSignatureError):
        @with_session()
        def no_session(name: str):
            return name
