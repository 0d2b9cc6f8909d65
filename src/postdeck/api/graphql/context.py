from typing import Any, Dict, Optional

from fastapi import Request
from strawberry.types import Info

from postdeck.api.dependencies.auth.strategies import AuthenticatedUser, JwtStrategy, get_strategy
from postdeck.core.exceptions import AuthenticationRequiredError, JWTError, JWTConfigurationError
from postdeck.core.exceptions.services import AuthServiceException
from postdeck.core.postdeck_logger import get_logger

logger = get_logger("graphql_context", parent_folder="api")

GRAPHQL_AUTH_STRATEGY = "jwt"


def resolve_user(request: Request) -> Optional[AuthenticatedUser]:
    """Geçerli bir credential varsa kullanıcıyı döner; yoksa None (public alanlar için)."""
    strategy = get_strategy(GRAPHQL_AUTH_STRATEGY)
    credentials = JwtStrategy.credentials_from_header(request.headers.get("Authorization"))
    try:
        return strategy.authenticate(request, credentials)
    except AuthenticationRequiredError:
        return None
    except JWTConfigurationError:
        raise
    except (JWTError, AuthServiceException) as e:
        logger.info("GraphQL isteğinde geçersiz credential", extra={"error_code": e.error_code})
        return None


async def get_context(request: Request) -> Dict[str, Any]:
    user = resolve_user(request)
    if user is not None:
        request.state.user = user
    return {"request": request, "user": user}


def current_user(info: Info) -> AuthenticatedUser:
    return info.context["user"]
