from .context import TraceContext, trace, get_current_context, set_current_context
from .core import setup_logger, HandlerConfig, TraceContextFilter
from .formatters import JSONFormatter, PrettyFormatter
from .handlers import AsyncHandler, AsyncConsoleHandler, AsyncRotatingFileHandler

__all__ = [
    "TraceContext",
    "trace",
    "get_current_context",
    "set_current_context",
    "setup_logger",
    "HandlerConfig",
    "TraceContextFilter",
    "JSONFormatter",
    "PrettyFormatter",
    "AsyncHandler",
    "AsyncConsoleHandler",
    "AsyncRotatingFileHandler",
]
