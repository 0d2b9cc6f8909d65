import uuid
from sqlalchemy import Column, String
from sqlalchemy.orm import DeclarativeBase, declared_attr


class BaseModel(DeclarativeBase):
    """Tüm modeller için ortak taban: ``{PREFIX}-{16 hex}`` formatında 20 karakterlik id."""

    __abstract__ = True
    __prefix__ = "GEN"

    @declared_attr
    def id(cls):
        return Column(String(20), primary_key=True, default=cls._generate_id, nullable=False)

    @classmethod
    def _generate_id(cls) -> str:
        prefix = getattr(cls, "__prefix__", "GEN")
        if len(prefix) != 3:
            raise ValueError(f"Model prefix must be exactly 3 characters. Got: {prefix}")
        return f"{prefix}-{uuid.uuid4().hex[:16].upper()}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"
