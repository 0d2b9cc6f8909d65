"""Model mixin'leri."""

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declared_attr


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    @declared_attr
    def created_at(cls):
        return Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)

    @declared_attr
    def updated_at(cls):
        return Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

