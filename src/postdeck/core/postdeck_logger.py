"""
PostDeck Logger Manager
=======================

Merkezi logger yönetimi.

Yapı:
    src/logs/
        ├── app.log                              (Tüm loglar, Pretty format)
        ├── error.log                            (ERROR+ loglar, JSON format)
        └── {parent_folder}/{service_name}/
            └── service.log                      (Servis logları, JSON format)

Kullanım:
    from postdeck.core.postdeck_logger import get_logger

    logger = get_logger("Auth Service", parent_folder="services")
    logger.info("Kullanıcı girişi", extra={"user_id": "USR-..."})
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from .logger import (
    AsyncHandler,
    AsyncRotatingFileHandler,
    HandlerConfig,
    JSONFormatter,
    PrettyFormatter,
    setup_logger,
)


LOGS_DIR = Path(__file__).resolve().parents[2] / "logs"

MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5

ROOT_LEVEL = logging.INFO
ERROR_LEVEL = logging.ERROR
SERVICE_LEVEL = logging.DEBUG

ROOT_LOGGER_NAME = "postdeck"


class PostDeckLoggerManager:
    """Tüm logger'ları tek noktadan yöneten singleton."""

    _instance: Optional[PostDeckLoggerManager] = None

    def __new__(cls) -> PostDeckLoggerManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._loggers = {}
            cls._instance._handlers = {}
            cls._instance._root_ready = False
        return cls._instance

    _loggers: Dict[str, logging.Logger]
    _handlers: Dict[str, List[AsyncHandler]]

    def _setup_root_logger(self) -> None:
        handlers = [
            HandlerConfig(
                handler=AsyncRotatingFileHandler(
                    filename=str(LOGS_DIR / "app.log"),
                    max_bytes=MAX_BYTES,
                    backup_count=BACKUP_COUNT,
                    level=ROOT_LEVEL,
                ),
                formatter=PrettyFormatter(service_name=ROOT_LOGGER_NAME),
                level=ROOT_LEVEL,
            ),
            HandlerConfig(
                handler=AsyncRotatingFileHandler(
                    filename=str(LOGS_DIR / "error.log"),
                    max_bytes=MAX_BYTES,
                    backup_count=BACKUP_COUNT,
                    level=ERROR_LEVEL,
                ),
                formatter=JSONFormatter(service_name=ROOT_LOGGER_NAME, include_location=True),
                level=ERROR_LEVEL,
            ),
        ]
        logger, created = setup_logger(name=ROOT_LOGGER_NAME, level=ROOT_LEVEL, handlers=handlers)
        self._loggers["root"] = logger
        self._handlers["root"] = created
        self._root_ready = True

    def get_logger(self, service_name: Optional[str] = None, parent_folder: Optional[str] = None) -> logging.Logger:
        if not self._root_ready:
            self._setup_root_logger()

        if service_name is None:
            return self._loggers["root"]

        key = f"{parent_folder}/{service_name}" if parent_folder else service_name
        if key not in self._loggers:
            self._loggers[key] = self._create_service_logger(service_name, parent_folder, key)
        return self._loggers[key]

    def _create_service_logger(self, service_name: str, parent_folder: Optional[str], key: str) -> logging.Logger:
        service_dir = LOGS_DIR / parent_folder / service_name if parent_folder else LOGS_DIR / service_name

        handlers = [
            HandlerConfig(
                handler=AsyncRotatingFileHandler(
                    filename=str(service_dir / "service.log"),
                    max_bytes=MAX_BYTES,
                    backup_count=BACKUP_COUNT,
                    level=SERVICE_LEVEL,
                ),
                formatter=JSONFormatter(service_name=service_name, include_exception=False),
                level=SERVICE_LEVEL,
            ),
        ]

        # postdeck.{key} -> app.log ve error.log'a da propagate eder
        logger_name = f"{ROOT_LOGGER_NAME}.{key.replace('/', '.')}"
        logger, created = setup_logger(
            name=logger_name,
            level=SERVICE_LEVEL,
            service_name=service_name,
            handlers=handlers,
            propagate=True,
        )
        self._handlers[key] = created
        return logger

    def shutdown(self) -> None:
        for handlers in self._handlers.values():
            for handler in handlers:
                handler.stop()


_manager = PostDeckLoggerManager()


def get_logger(service_name: Optional[str] = None, parent_folder: Optional[str] = None) -> logging.Logger:
    return _manager.get_logger(service_name, parent_folder=parent_folder)


def shutdown_loggers() -> None:
    _manager.shutdown()
