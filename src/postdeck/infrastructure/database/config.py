from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any

from sqlalchemy.engine import URL
from sqlalchemy.pool import QueuePool, NullPool, StaticPool

from postdeck.core.exceptions import DatabaseValidationError, DatabaseConfigurationError


class DatabaseType(str, Enum):
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"

    @property
    def driver_name(self) -> str:
        return {
            DatabaseType.SQLITE: "sqlite",
            DatabaseType.POSTGRESQL: "postgresql+psycopg2",
            DatabaseType.MYSQL: "mysql+pymysql",
        }[self]

    def default_port(self) -> Optional[int]:
        return {DatabaseType.POSTGRESQL: 5432, DatabaseType.MYSQL: 3306}.get(self)

    def requires_credentials(self) -> bool:
        return self is not DatabaseType.SQLITE


@dataclass
class EngineConfig:
    """`create_engine` havuz ayarları ve `sessionmaker` davranışları."""

    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600
    pool_pre_ping: bool = True
    echo: bool = False
    autoflush: bool = True
    expire_on_commit: bool = False
    connect_args: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("pool_size", "max_overflow", "pool_timeout", "pool_recycle"):
            try:
                value = int(getattr(self, name))
            except (TypeError, ValueError) as e:
                raise DatabaseValidationError(field_name=name, cause=e)
            if value < 0:
                raise DatabaseValidationError(field_name=name)
            setattr(self, name, value)

    def to_session_kwargs(self) -> Dict[str, Any]:
        return {"autoflush": self.autoflush, "expire_on_commit": self.expire_on_commit}


@dataclass
class DatabaseConfig:
    """
    Veritabanı bağlantı ve engine yapılandırması.

    SQLite (dosya veya :memory:), PostgreSQL ve MySQL desteklenir.
    """

    db_name: str = "postdeck"
    db_type: DatabaseType = DatabaseType.SQLITE
    host: str = "localhost"
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    sqlite_path: str = "./postdeck.db"
    engine_config: EngineConfig = field(default_factory=EngineConfig)

    def __post_init__(self):
        if not isinstance(self.db_type, DatabaseType):
            try:
                self.db_type = DatabaseType(str(self.db_type).lower())
            except ValueError as e:
                raise DatabaseConfigurationError(config_name="db_type", cause=e) from e

        if self.port is None:
            self.port = self.db_type.default_port()

        if self.db_type.requires_credentials():
            if not self.username:
                raise DatabaseValidationError(field_name="username")
            if self.password is None:
                raise DatabaseValidationError(field_name="password")
            if not self.host:
                raise DatabaseValidationError(field_name="host")
        elif not self.sqlite_path or not self.sqlite_path.strip():
            raise DatabaseValidationError(field_name="sqlite_path")

    def __repr__(self) -> str:
        if self.db_type == DatabaseType.SQLITE:
            return f"DatabaseConfig(type={self.db_type.value}, path={self.sqlite_path})"
        return (
            f"DatabaseConfig(type={self.db_type.value}, "
            f"host={self.host}:{self.port}, db={self.db_name}, user={self.username})"
        )

    @property
    def is_memory(self) -> bool:
        return self.db_type == DatabaseType.SQLITE and self.sqlite_path == ":memory:"

    def get_connection_string(self) -> str:
        if self.db_type == DatabaseType.SQLITE:
            return "sqlite://" if self.is_memory else f"sqlite:///{self.sqlite_path}"

        query = {"charset": "utf8mb4"} if self.db_type == DatabaseType.MYSQL else None
        return URL.create(
            drivername=self.db_type.driver_name,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db_name,
            query=query or {},
        ).render_as_string(hide_password=False)

    def get_pool_class(self):
        if self.db_type == DatabaseType.SQLITE:
            return StaticPool if self.is_memory else NullPool
        return QueuePool

    def get_connect_args(self) -> Dict[str, Any]:
        args: Dict[str, Any] = dict(self.engine_config.connect_args or {})
        if self.db_type == DatabaseType.SQLITE:
            args.setdefault("check_same_thread", False)
        else:
            args.setdefault("connect_timeout", 10)
        return args


def get_sqlite_config(sqlite_path: str = "./postdeck.db") -> DatabaseConfig:
    return DatabaseConfig(db_type=DatabaseType.SQLITE, sqlite_path=sqlite_path)


def get_database_config_from_settings() -> DatabaseConfig:
    """[Database] ini bölümü + DB_USERNAME/DB_PASSWORD env değişkenlerinden konfigürasyon üretir."""
    from postdeck.utils.handlers import ConfigurationHandler, EnvironmentHandler

    db_type = ConfigurationHandler.get_value_as_str("Database", "db_type", fallback="sqlite")
    engine_config = EngineConfig(
        pool_size=ConfigurationHandler.get_value_as_int("Database", "pool_size", fallback=10),
        max_overflow=ConfigurationHandler.get_value_as_int("Database", "max_overflow", fallback=20),
        echo=ConfigurationHandler.get_value_as_bool("Database", "echo", fallback=False),
    )
    return DatabaseConfig(
        db_name=ConfigurationHandler.get_value_as_str("Database", "db_name", fallback="postdeck"),
        db_type=db_type,
        host=ConfigurationHandler.get_value_as_str("Database", "host", fallback="localhost"),
        port=ConfigurationHandler.get_value_as_int("Database", "port", fallback=None),
        username=EnvironmentHandler.get_value_as_str("DB_USERNAME", default=None),
        password=EnvironmentHandler.get_value_as_str("DB_PASSWORD", default=None),
        sqlite_path=ConfigurationHandler.get_value_as_str("Database", "sqlite_path", fallback="./postdeck.db"),
        engine_config=engine_config,
    )
