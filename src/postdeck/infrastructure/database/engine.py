from contextlib import contextmanager
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import (
    DatabaseConnectionError,
    DatabaseEngineError,
    DatabaseQueryError,
)
from .config import DatabaseConfig


logger = get_logger("database", parent_folder="infrastructure")


class DatabaseEngine:
    """
    SQLAlchemy engine ve session factory sarmalayıcısı.

    Yaşam döngüsü:
        1. __init__(config): yapılandırma alınır, bağlantı açılmaz
        2. start(): engine ve sessionmaker oluşturulur
        3. session_context(): session açılır, commit/rollback/close yönetilir
        4. stop(): bağlantı havuzu kapatılır
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self.config = config
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_alive(self) -> bool:
        return self._engine is not None and self._session_factory is not None

    @property
    def engine(self) -> Engine:
        if not self.is_alive:
            raise DatabaseEngineError()
        return self._engine

    def start(self) -> None:
        if self.is_alive:
            return

        pool_class = self.config.get_pool_class()
        kwargs = {
            "poolclass": pool_class,
            "echo": self.config.engine_config.echo,
            "connect_args": self.config.get_connect_args(),
        }
        if pool_class not in (NullPool, StaticPool):
            ec = self.config.engine_config
            kwargs.update(
                pool_size=ec.pool_size,
                max_overflow=ec.max_overflow,
                pool_timeout=ec.pool_timeout,
                pool_recycle=ec.pool_recycle,
                pool_pre_ping=ec.pool_pre_ping,
            )

        try:
            self._engine = create_engine(self.config.get_connection_string(), **kwargs)
        except SQLAlchemyError as e:
            logger.error("Engine oluşturulamadı", extra={"config": repr(self.config), "error": str(e)})
            raise DatabaseConnectionError(cause=e) from e

        self._session_factory = sessionmaker(bind=self._engine, **self.config.engine_config.to_session_kwargs())
        logger.info("Veritabanı engine başlatıldı", extra={"config": repr(self.config)})

    def stop(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Veritabanı engine durduruldu")
        self._engine = None
        self._session_factory = None

    def get_session(self) -> Session:
        if not self.is_alive:
            raise DatabaseEngineError()
        return self._session_factory()

    @contextmanager
    def session_context(self, *, auto_commit: bool = True, read_only: bool = False):
        """
        Session açar; hata olursa rollback, başarılıysa (auto_commit ise) commit yapar.

        read_only=True ise commit yapılmaz, close() açık transaction'ı geri alır.
        """
        session = self.get_session()
        try:
            yield session
            if auto_commit and not read_only:
                session.commit()
        except OperationalError as e:
            session.rollback()
            logger.error("Veritabanı bağlantı hatası", extra={"error": str(e)})
            raise DatabaseConnectionError(cause=e) from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Veritabanı sorgu hatası", extra={"error": str(e)})
            raise DatabaseQueryError(message=f"Database query error: {e}", cause=e) from e
        except BaseException:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self, base_metadata) -> None:
        base_metadata.create_all(self.engine)
        logger.info("Tablolar oluşturuldu", extra={"tables": sorted(base_metadata.tables)})

    def drop_tables(self, base_metadata) -> None:
        base_metadata.drop_all(self.engine)
        logger.info("Tablolar silindi")

    def health_check(self) -> dict:
        if not self.is_alive:
            return {"status": "stopped"}
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {"status": "healthy", "database": self.config.db_type.value}
        except SQLAlchemyError as e:
            logger.warning("Veritabanı health check başarısız", extra={"error": str(e)})
            return {"status": "unhealthy", "error": str(e)}
