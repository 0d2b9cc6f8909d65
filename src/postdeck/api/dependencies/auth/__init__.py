from .strategies import (
    AuthenticatedUser,
    AuthStrategy,
    JwtStrategy,
    bearer_scheme,
    register_strategy,
    get_strategy,
)
from .guards import AuthGuard, JwtAuthGuard

__all__ = [
    "AuthenticatedUser",
    "AuthStrategy",
    "JwtStrategy",
    "bearer_scheme",
    "register_strategy",
    "get_strategy",
    "AuthGuard",
    "JwtAuthGuard",
]
