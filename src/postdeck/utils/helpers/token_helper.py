import uuid
from datetime import datetime, timezone, timedelta
from typing import Optional


def generate_uuid_token() -> str:
    """Doğrulama, şifre sıfırlama ve davet linklerinde kullanılan uuid4 token."""
    return str(uuid.uuid4())


def generate_short_suffix(length: int = 4) -> str:
    return uuid.uuid4().hex[:length]


def _as_aware(value: datetime) -> datetime:
    # SQLite timezone bilgisini saklamaz
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_token_expired(expires_at: Optional[datetime], now: Optional[datetime] = None) -> bool:
    if expires_at is None:
        return True
    now = now or datetime.now(timezone.utc)
    return _as_aware(now) > _as_aware(expires_at)


def get_expires_at(*, hours: int = 0, days: int = 0) -> datetime:
    return datetime.now(timezone.utc) + timedelta(hours=hours, days=days)
