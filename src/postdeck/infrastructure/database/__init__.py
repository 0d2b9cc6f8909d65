"""
PostDeck Database Package
=========================

- Konfigürasyon (DatabaseConfig, EngineConfig)
- Engine ve manager (DatabaseEngine, DatabaseManager)
- Session decorator'ları
- Model ve repository tabanları
"""

from .config import (
    DatabaseConfig,
    DatabaseType,
    EngineConfig,
    get_sqlite_config,
    get_database_config_from_settings,
)
from .engine import DatabaseEngine
from .manager import DatabaseManager, get_database_manager
from .decorators import (
    with_session,
    with_transaction,
    with_transaction_session,
    with_readonly_session,
)
from .models import BaseModel, TimestampMixin
from .repos import BaseRepository, handle_exceptions

__all__ = [
    "DatabaseConfig",
    "DatabaseType",
    "EngineConfig",
    "get_sqlite_config",
    "get_database_config_from_settings",
    "DatabaseEngine",
    "DatabaseManager",
    "get_database_manager",
    "with_session",
    "with_transaction",
    "with_transaction_session",
    "with_readonly_session",
    "BaseModel",
    "TimestampMixin",
    "BaseRepository",
    "handle_exceptions",
]
