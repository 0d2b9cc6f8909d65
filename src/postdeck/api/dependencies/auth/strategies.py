"""
Kimlik doğrulama stratejileri.

Guard'lar doğrulama mantığı içermez; isimle kayıtlı bir stratejiye delege eder.
Aynı strateji hem REST guard'ları hem GraphQL context'i tarafından kullanılır.
"""

from typing import Dict, Optional, TypedDict

from fastapi import Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi.security.utils import get_authorization_scheme_param

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import AuthenticationRequiredError, AuthStrategyNotFoundError
from postdeck.domain.services import AuthService
from postdeck.utils.helpers.jwt_helper import decode_access_token

logger = get_logger("auth_strategies", parent_folder="api")


# OpenAPI'de guard'lı route'lar için Bearer şeması olarak görünür.
# auto_error=False: eksik credential'ı strateji reddeder, guard 401'e çevirir.
bearer_scheme = HTTPBearer(
    scheme_name="Bearer",
    description="JWT Bearer Token Authentication",
    auto_error=False,
)


class AuthenticatedUser(TypedDict):
    """Handler'lara geçilen doğrulanmış kullanıcı"""
    user_id: str
    email: str
    tenant_id: str
    role: str
    auth_type: str


class AuthStrategy:
    name: str = ""

    def authenticate(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials],
    ) -> AuthenticatedUser:
        raise NotImplementedError


_strategies: Dict[str, AuthStrategy] = {}


def register_strategy(strategy: AuthStrategy) -> None:
    _strategies[strategy.name] = strategy


def get_strategy(name: str) -> AuthStrategy:
    strategy = _strategies.get(name)
    if strategy is None:
        logger.error(f"Auth stratejisi bulunamadı: {name}", extra={"registered": list(_strategies)})
        raise AuthStrategyNotFoundError(strategy=name)
    return strategy


class JwtStrategy(AuthStrategy):
    """Bearer credential'ı access token olarak doğrular ve kullanıcıyı yükler."""

    name = "jwt"

    @staticmethod
    def credentials_from_header(authorization: Optional[str]) -> Optional[HTTPAuthorizationCredentials]:
        """HTTPBearer dependency'si dışında (GraphQL context) header'dan credential üretir."""
        scheme, param = get_authorization_scheme_param(authorization)
        if scheme.lower() != "bearer" or not param.strip():
            return None
        return HTTPAuthorizationCredentials(scheme=scheme, credentials=param.strip())

    def authenticate(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials],
    ) -> AuthenticatedUser:
        token = credentials.credentials.strip() if credentials else ""
        if not token:
            raise AuthenticationRequiredError(strategy=self.name)

        payload = decode_access_token(token)
        user = AuthService.validate_user(user_id=payload["sub"])

        return AuthenticatedUser(
            user_id=user["id"],
            email=user["email"],
            tenant_id=user["tenant_id"],
            role=user["role"],
            auth_type=self.name,
        )


register_strategy(JwtStrategy())
