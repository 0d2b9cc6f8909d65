"""Base Repository: minimal CRUD operasyonları."""

from typing import Any, Generic, Optional, TypeVar
from functools import wraps

from sqlalchemy.orm import DeclarativeBase, Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from postdeck.core.exceptions import (
    DatabaseQueryError,
    DatabaseValidationError,
    DatabaseResourceNotFoundError,
)


T = TypeVar("T", bound=DeclarativeBase)


def handle_exceptions(func):
    """SQLAlchemy hatalarını PostDeck veritabanı hatalarına çevirir."""
    @wraps(func)
    def wrapper(self, session: Session, *args, **kwargs):
        try:
            return func(self, session, *args, **kwargs)
        except IntegrityError as e:
            session.rollback()
            raise DatabaseValidationError(
                field_name="constraint",
                message=f"Constraint violation: {e.orig}",
                cause=e
            ) from e
        except SQLAlchemyError as e:
            session.rollback()
            raise DatabaseQueryError(message=f"Database query error: {e}", cause=e) from e
    return wrapper


class BaseRepository(Generic[T]):
    def __init__(self, model: type[T]):
        self.model = model
        self.model_name = model.__name__

    @handle_exceptions
    def create(self, session: Session, **data: Any) -> T:
        obj = self.model(**data)
        session.add(obj)
        session.flush()
        return obj

    @handle_exceptions
    def get(self, session: Session, record_id: Any) -> Optional[T]:
        return session.get(self.model, record_id)

    @handle_exceptions
    def get_or_raise(self, session: Session, record_id: Any) -> T:
        obj = self.get(session, record_id)
        if obj is None:
            raise DatabaseResourceNotFoundError(resource_name=self.model_name, resource_id=str(record_id))
        return obj

