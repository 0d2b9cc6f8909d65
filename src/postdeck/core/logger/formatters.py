from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# Python logging'in standart alanları, JSON'a eklenmez
RESERVED_LOG_ATTRS: frozenset[str] = frozenset({
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
    "created", "msecs", "relativeCreated", "thread", "threadName",
    "processName", "process", "message", "taskName",
})

MAX_SERIALIZE_DEPTH = 10


def serialize_value(value: Any, depth: int = 0) -> Any:
    """Değeri JSON-serializable hale getirir."""
    if depth > MAX_SERIALIZE_DEPTH:
        return f"<max depth {MAX_SERIALIZE_DEPTH} exceeded>"
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [serialize_value(v, depth + 1) for v in value]
    if isinstance(value, dict):
        return {str(k): serialize_value(v, depth + 1) for k, v in value.items()}
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return f"<bytes len={len(value)}>"
    return str(value)


def get_extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: serialize_value(value)
        for key, value in record.__dict__.items()
        if key not in RESERVED_LOG_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """
    Yapılandırılmış JSON log formatı.

    Örnek çıktı:
        {"timestamp":"2025-01-07T12:00:00.123456+00:00","level":"INFO",
         "service":"Auth Service","message":"Login successful","user_id":"USR-..."}
    """

    def __init__(self, service_name: Optional[str] = None, include_location: bool = False,
                 include_exception: bool = True):
        super().__init__()
        self.service_name = service_name
        self.include_location = include_location
        self.include_exception = include_exception

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="microseconds"),
            "level": record.levelname,
            "service": self.service_name or record.name,
            "message": record.getMessage(),
        }

        if self.include_location:
            log_data["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        log_data.update(get_extra_fields(record))

        if self.include_exception and record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)


class PrettyFormatter(logging.Formatter):
    """
    Okunabilir tek satır format:
        14:32:01 │ INFO     │ Auth Service    │ Login successful │ user_id=USR-...
    """

    def __init__(self, service_name: Optional[str] = None):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        time_str = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        service = self.service_name or record.name
        line = f"{time_str} │ {record.levelname:8} │ {service:15} │ {record.getMessage()}"

        extras = get_extra_fields(record)
        if extras:
            line += " │ " + " ".join(f"{k}={v}" for k, v in extras.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        return line
