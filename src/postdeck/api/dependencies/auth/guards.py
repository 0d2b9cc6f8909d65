from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from postdeck.core.logger.context import get_current_context
from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import (
    AuthenticationRequiredError,
    JWTError,
    JWTConfigurationError,
)
from postdeck.core.exceptions.services import AuthServiceException
from .strategies import AuthenticatedUser, bearer_scheme, get_strategy

logger = get_logger("auth_guards", parent_folder="api")


class AuthGuard:
    """
    İsimle kayıtlı stratejiyi çalıştıran FastAPI dependency'si.

    Başarılı olursa kullanıcı ``request.state.user`` üzerine yazılır ve döndürülür.
    Her doğrulama hatası 401 + ``WWW-Authenticate: Bearer`` olarak döner.

        @router.get("/me")
        async def me(user: AuthenticatedUser = Depends(JwtAuthGuard())): ...
    """

    def __init__(self, strategy_name: str):
        self.strategy_name = strategy_name

    async def __call__(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> AuthenticatedUser:
        strategy = get_strategy(self.strategy_name)

        try:
            user = strategy.authenticate(request, credentials)
        except JWTConfigurationError:
            raise
        except (AuthenticationRequiredError, JWTError, AuthServiceException) as e:
            logger.info(
                "Kimlik doğrulama reddedildi",
                extra={"strategy": self.strategy_name, "path": request.url.path, "error_code": e.error_code}
            )
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=e.error_message,
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

        request.state.user = user
        request.state.user_id = user["user_id"]
        request.state.auth_type = user["auth_type"]

        ctx = get_current_context()
        if ctx is not None:
            ctx.extra["user_id"] = user["user_id"]

        return user


class JwtAuthGuard(AuthGuard):
    def __init__(self):
        super().__init__("jwt")
