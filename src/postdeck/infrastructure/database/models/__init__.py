from .base import BaseModel
from .mixins import TimestampMixin, utc_now

__all__ = ["BaseModel", "TimestampMixin", "utc_now"]
