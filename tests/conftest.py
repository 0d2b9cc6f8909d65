import os
import sys
import tempfile
from configparser import ConfigParser
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

# Handler'lar import edilmeden önce test .env dosyası hazırlanır
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="postdeck-tests-"))
UPLOAD_DIR = _TEST_ROOT / "uploads"
PUBLIC_BASE_URL = "https://cdn.test.local/uploads"
ENV_PATH = _TEST_ROOT / ".env"
ENV_VALUES = {
    "TestKey": "ThisKeyIsForEnvTest",
    "APP_ENV": "test",
    "JWT_SECRET_KEY": "test_jwt_secret_key_for_testing_purposes_only_min_32_chars",
    "UPLOAD_DIR": str(UPLOAD_DIR),
    "PUBLIC_BASE_URL": PUBLIC_BASE_URL,
    "FRONTEND_URL": "http://localhost:3000",
    "MAILTRAP_API_TOKEN": "test-mailtrap-token",
}
ENV_PATH.write_text("".join(f"{key}={value}\n" for key, value in ENV_VALUES.items()), encoding="utf-8")
os.environ.update(ENV_VALUES)

from postdeck.utils.handlers import EnvironmentHandler, ConfigurationHandler  # noqa: E402
from postdeck.infrastructure.database import (  # noqa: E402
    BaseModel,
    DatabaseConfig,
    DatabaseManager,
    DatabaseType,
    get_database_manager,
)
from postdeck.domain.models import Tenant, User, UserInvitation, UserRole, InvitationStatus  # noqa: E402
from postdeck.domain.services import EmailService  # noqa: E402
from postdeck.utils.helpers.crypto_helper import hash_password  # noqa: E402
from postdeck.utils.helpers.token_helper import generate_uuid_token, generate_short_suffix, get_expires_at  # noqa: E402


def init_handlers():
    if not EnvironmentHandler.is_initialized():
        EnvironmentHandler._env_path = None
        EnvironmentHandler.load(ENV_PATH)
    if not ConfigurationHandler.is_initialized():
        ConfigurationHandler._parser = ConfigParser()
        ConfigurationHandler.init()


@pytest.fixture(autouse=True)
def handlers():
    """Her testten önce handler'ların test.ini ve test .env ile yüklü olmasını sağlar."""
    os.environ.update(ENV_VALUES)
    init_handlers()
    yield


@pytest.fixture
def sqlite_path(tmp_path):
    return str(tmp_path / "test_postdeck.db")


@pytest.fixture
def db_config(sqlite_path):
    return DatabaseConfig(
        db_type=DatabaseType.SQLITE,
        db_name="test_postdeck_db",
        sqlite_path=sqlite_path
    )


@pytest.fixture
def clean_manager():
    manager = DatabaseManager()
    manager.reset(full_reset=True)
    yield manager
    manager.reset(full_reset=True)


@pytest.fixture
def manager(clean_manager, db_config):
    manager = get_database_manager(db_config)
    manager.engine.create_tables(BaseModel.metadata)
    yield manager
    manager.engine.drop_tables(BaseModel.metadata)


@pytest.fixture
def upload_dir():
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    return UPLOAD_DIR


DEFAULT_PASSWORD = "Sup3rSecret!"


@pytest.fixture
def mail():
    """EmailService gönderimlerini yakalar; gerçek MailTrap çağrısı yapılmaz."""
    with patch.object(EmailService, "send_verification_email") as verification, \
         patch.object(EmailService, "send_password_reset_email") as reset, \
         patch.object(EmailService, "send_welcome_email") as welcome, \
         patch.object(EmailService, "send_invitation_email") as invitation:
        yield SimpleNamespace(verification=verification, reset=reset, welcome=welcome, invitation=invitation)


@pytest.fixture
def db(manager, mail):
    return manager


@pytest.fixture(scope="session")
def password_hash():
    return hash_password(DEFAULT_PASSWORD, rounds=4)


@pytest.fixture
def make_tenant(db):
    def _make(name="Acme Inc", subdomain=None):
        with db.engine.session_context() as session:
            tenant = Tenant(name=name, subdomain=subdomain or f"{Tenant.slugify(name)}-{generate_short_suffix(6)}")
            session.add(tenant)
            session.flush()
            return tenant
    return _make


@pytest.fixture
def make_user(db, make_tenant, password_hash):
    def _make(email="owner@acme.example.com", role=UserRole.ADMIN, is_verified=True, is_active=True, tenant=None,
              first_name="Ada", last_name="Lovelace"):
        tenant = tenant or make_tenant()
        with db.engine.session_context() as session:
            user = User(
                email=email,
                password_hash=password_hash,
                first_name=first_name,
                last_name=last_name,
                is_verified=is_verified,
                is_active=is_active,
                tenant_id=tenant.id,
                role=role,
            )
            session.add(user)
            session.flush()
            return user
    return _make


@pytest.fixture
def make_invitation(db):
    def _make(inviter, email="new@acme.example.com", role=UserRole.USER, status=InvitationStatus.PENDING, days=7):
        with db.engine.session_context() as session:
            invitation = UserInvitation(
                email=email,
                tenant_id=inviter.tenant_id,
                invited_by_user_id=inviter.id,
                role=role,
                token=generate_uuid_token(),
                status=status,
                expires_at=get_expires_at(days=days),
            )
            session.add(invitation)
            session.flush()
            return invitation
    return _make


@pytest.fixture
def load(db):
    """Kaydı yeni bir session ile tekrar okur."""
    def _load(model, record_id):
        with db.engine.session_context(read_only=True) as session:
            return session.get(model, record_id)
    return _load
