from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .context import get_current_context
from .formatters import PrettyFormatter
from .handlers import AsyncHandler, AsyncConsoleHandler


class TraceContextFilter(logging.Filter):
    """Aktif trace context'in trace_id, span_id ve correlation_id alanlarını kayda ekler."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = get_current_context()
        if ctx is not None:
            for key, value in ctx.to_dict().items():
                setattr(record, key, value)
        return True


@dataclass
class HandlerConfig:
    """Handler + Formatter eşleştirmesi."""
    handler: Union[AsyncHandler, logging.Handler]
    formatter: Optional[logging.Formatter] = None
    level: Optional[int] = None


def setup_logger(
    name: str,
    level: int = logging.INFO,
    service_name: Optional[str] = None,
    handlers: Optional[List[HandlerConfig]] = None,
    propagate: bool = False,
) -> Tuple[logging.Logger, List[AsyncHandler]]:
    """
    Logger'ı verilen handler'larla kurar.

    Handler verilmezse tek bir asenkron console handler eklenir.
    Asenkron handler'lar ikinci eleman olarak döner, shutdown sırasında durdurulur.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = propagate

    svc = service_name or name
    if not handlers:
        handlers = [HandlerConfig(AsyncConsoleHandler(level=level), PrettyFormatter(service_name=svc))]

    created: List[AsyncHandler] = []
    for config in handlers:
        formatter = config.formatter or PrettyFormatter(service_name=svc)
        handler_level = config.level or level

        if isinstance(config.handler, AsyncHandler):
            config.handler.handler.setFormatter(formatter)
            config.handler.handler.setLevel(handler_level)
            logger.addHandler(config.handler.get_queue_handler())
            created.append(config.handler)
        else:
            config.handler.setFormatter(formatter)
            config.handler.setLevel(handler_level)
            logger.addHandler(config.handler)

    if not any(isinstance(f, TraceContextFilter) for f in logger.filters):
        logger.addFilter(TraceContextFilter())

    return logger, created
