import pytest

from postdeck.infrastructure.database import DatabaseEngine, BaseModel
from postdeck.domain.models import Tenant
from postdeck.core.exceptions import DatabaseEngineError, DatabaseQueryError


@pytest.fixture
def engine(db_config):
    engine = DatabaseEngine(db_config)
    engine.start()
    engine.create_tables(BaseModel.metadata)
    yield engine
    engine.stop()


def test_engine_lifecycle(db_config):
    engine = DatabaseEngine(db_config)
    assert engine.is_alive is False
    with pytest.raises(DatabaseEngineError):
        engine.get_session()

    engine.start()
    assert engine.is_alive is True
    engine.stop()
    assert engine.is_alive is False


def test_session_context_commits(engine):
    with engine.session_context() as session:
        session.add(Tenant(name="Acme", subdomain="acme"))

    with engine.session_context(read_only=True) as session:
        assert session.query(Tenant).filter_by(subdomain="acme").count() == 1


def test_session_context_rolls_back_on_error(engine):
    with pytest.raises(ValueError):
        with engine.session_context() as session:
            session.add(Tenant(name="Acme", subdomain="acme"))
            session.flush()
            raise ValueError("boom")

    with engine.session_context(read_only=True) as session:
        assert session.query(Tenant).count() == 0


def test_session_context_wraps_integrity_errors(engine):
    with engine.session_context() as session:
        session.add(Tenant(name="Acme", subdomain="acme"))

    with pytest.raises(DatabaseQueryError):
        with engine.session_context() as session:
            session.add(Tenant(name="Other", subdomain="acme"))


def test_health_check(engine, db_config):
    assert engine.health_check() == {"status": "healthy", "database": "sqlite"}

    stopped = DatabaseEngine(db_config)
    assert stopped.health_check() == {"status": "stopped"}
