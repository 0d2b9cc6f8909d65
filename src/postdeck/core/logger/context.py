from __future__ import annotations

import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Mapping


def _generate_id() -> str:
    """16 haneli hex id üretir."""
    return uuid.uuid4().hex[:16]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


@dataclass
class TraceContext:
    trace_id: str = field(default_factory=_generate_id)
    span_id: str = field(default_factory=_generate_id)
    parent_span_id: Optional[str] = None
    correlation_id: Optional[str] = None
    started_at: str = field(default_factory=_now_iso)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "trace_id": self.trace_id,
            "span_id": self.span_id,
        }
        if self.parent_span_id:
            data["parent_span_id"] = self.parent_span_id
        if self.correlation_id:
            data["correlation_id"] = self.correlation_id
        data.update(self.extra)
        return data

    def to_headers(self) -> Dict[str, str]:
        headers = {"X-Trace-Id": self.trace_id, "X-Span-Id": self.span_id}
        if self.correlation_id:
            headers["X-Correlation-Id"] = self.correlation_id
        return headers

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> TraceContext:
        """Gelen header'lardan (case-insensitive) trace context oluşturur."""
        normalized = {k.lower(): v for k, v in headers.items()}
        return cls(
            trace_id=normalized.get("x-trace-id") or _generate_id(),
            parent_span_id=normalized.get("x-span-id"),
            correlation_id=normalized.get("x-correlation-id") or _generate_id(),
        )


_context_var: ContextVar[Optional[TraceContext]] = ContextVar("trace_context", default=None)


def get_current_context() -> Optional[TraceContext]:
    return _context_var.get()


def set_current_context(ctx: Optional[TraceContext]) -> None:
    _context_var.set(ctx)


class trace:
    """
    Trace context manager, sync ve async kullanım destekler.

    Kullanım:
        with trace(correlation_id="req-123") as ctx:
            do_work()

        async with trace(headers=request.headers) as ctx:
            await do_async_work()
    """

    def __init__(self, correlation_id: Optional[str] = None,
                 headers: Optional[Mapping[str, str]] = None, **extra: Any):
        self._token = None
        if headers is not None:
            self.context = TraceContext.from_headers(headers)
        else:
            self.context = TraceContext(correlation_id=correlation_id, extra=extra)

    def __enter__(self) -> TraceContext:
        self._token = _context_var.set(self.context)
        return self.context

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _context_var.reset(self._token)

    async def __aenter__(self) -> TraceContext:
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)
