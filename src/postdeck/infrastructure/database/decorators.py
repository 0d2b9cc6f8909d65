"""
Session injection decorator'ları.

Dekore edilen fonksiyon ``session`` parametresi almalıdır. Çağıran session
vermezse DatabaseManager üzerinden yeni bir session açılır ve fonksiyona geçilir;
verirse mevcut session kullanılır ve transaction sınırı çağırana bırakılır.

    class AuthService:
        @classmethod
        @with_transaction(manager=None)
        def login(cls, session, *, email, password): ...
"""

import inspect
from functools import wraps
from typing import Callable, Optional

from postdeck.core.exceptions import DatabaseDecoratorSignatureError
from .manager import DatabaseManager


def _build_decorator(manager: Optional[DatabaseManager], *, auto_commit: bool, read_only: bool) -> Callable:
    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        if "session" not in signature.parameters:
            raise DatabaseDecoratorSignatureError(function_name=func.__qualname__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound = signature.bind_partial(*args, **kwargs)
            if bound.arguments.get("session") is not None:
                return func(*args, **kwargs)

            kwargs.pop("session", None)
            engine = (manager or DatabaseManager()).engine
            with engine.session_context(auto_commit=auto_commit, read_only=read_only) as session:
                return func(*args, session=session, **kwargs)

        return wrapper
    return decorator


def with_session(manager: Optional[DatabaseManager] = None, auto_commit: bool = True) -> Callable:
    return _build_decorator(manager, auto_commit=auto_commit, read_only=False)


def with_transaction_session(manager: Optional[DatabaseManager] = None) -> Callable:
    """Tek transaction: başarılıysa commit, exception'da rollback."""
    return _build_decorator(manager, auto_commit=True, read_only=False)


def with_readonly_session(manager: Optional[DatabaseManager] = None) -> Callable:
    return _build_decorator(manager, auto_commit=False, read_only=True)


with_transaction = with_transaction_session
