"""
PostDeck Core Package
=====================

- Exception hiyerarşisi
- Logging sistemi
- Uygulama ve sunucu (core.postdeck)
"""

from .exceptions import (
    PostDeckException,
    ErrorDetailLevel,
    get_error_level_from_env,
)
from .logger import (
    setup_logger,
    HandlerConfig,
    TraceContextFilter,
    AsyncHandler,
    AsyncConsoleHandler,
    AsyncRotatingFileHandler,
    JSONFormatter,
    PrettyFormatter,
    TraceContext,
    trace,
    get_current_context,
    set_current_context,
)
from .postdeck_logger import get_logger, shutdown_loggers

__all__ = [
    "PostDeckException",
    "ErrorDetailLevel",
    "get_error_level_from_env",
    "setup_logger",
    "HandlerConfig",
    "TraceContextFilter",
    "AsyncHandler",
    "AsyncConsoleHandler",
    "AsyncRotatingFileHandler",
    "JSONFormatter",
    "PrettyFormatter",
    "TraceContext",
    "trace",
    "get_current_context",
    "set_current_context",
    "get_logger",
    "shutdown_loggers",
]
