import threading
from typing import Optional

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import (
    DatabaseManagerAlreadyInitializedError,
    DatabaseManagerNotInitializedError,
)
from .config import DatabaseConfig
from .engine import DatabaseEngine


logger = get_logger("database", parent_folder="infrastructure")


class DatabaseManager:
    """Uygulama genelinde tek bir DatabaseEngine tutan thread-safe singleton."""

    _instance: Optional["DatabaseManager"] = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._engine = None
                    instance._config = None
                    cls._instance = instance
        return cls._instance

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> DatabaseEngine:
        if self._engine is None:
            raise DatabaseManagerNotInitializedError()
        return self._engine

    def initialize(self, config: DatabaseConfig, *, auto_start: bool = True,
                   force_reinitialize: bool = False) -> DatabaseEngine:
        with self._lock:
            if self._engine is not None:
                if not force_reinitialize:
                    raise DatabaseManagerAlreadyInitializedError()
                self._engine.stop()

            engine = DatabaseEngine(config)
            if auto_start:
                engine.start()
            self._engine = engine
            self._config = config
            logger.info("DatabaseManager başlatıldı", extra={"config": repr(config)})
            return engine

    def reset(self, full_reset: bool = False) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.stop()
            self._engine = None
            if full_reset:
                self._config = None


def get_database_manager(config: Optional[DatabaseConfig] = None) -> DatabaseManager:
    """Manager'ı döndürür; config verilirse ve henüz başlatılmadıysa başlatır."""
    manager = DatabaseManager()
    if config is not None and not manager.is_initialized:
        manager.initialize(config)
    return manager
