from .exception_handling import (
    register_postdeck_handlers,
    build_error_response,
    postdeck_exception_handler,
    validation_exception_handler,
)
from .logging_middleware import LoggingMiddleware

__all__ = [
    "register_postdeck_handlers",
    "build_error_response",
    "postdeck_exception_handler",
    "validation_exception_handler",
    "LoggingMiddleware",
]
