import jwt
from typing import Dict, Any, Tuple, Optional
from datetime import datetime, timezone, timedelta

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import (
    PostDeckException,
    JWTConfigurationError,
    JWTExpiredError,
    JWTInvalidTokenError,
    JWTMissingClaimError,
    JWTTokenTypeError,
)
from postdeck.utils.handlers.environment_handler import EnvironmentHandler
from postdeck.utils.handlers.configuration_handler import ConfigurationHandler


ACCESS_TOKEN_TYPE = "access"
REQUIRED_CLAIMS = ("sub", "exp", "iat")

# Lazy cache
_jwt_secret_key: Optional[str] = None
_jwt_algorithm: Optional[str] = None
_access_token_expire: Optional[timedelta] = None

_logger = get_logger("jwt_helper", parent_folder="utils")


def _get_jwt_secret_key() -> str:
    global _jwt_secret_key

    if _jwt_secret_key is None:
        try:
            key = EnvironmentHandler.get_value_as_str("JWT_SECRET_KEY", default=None)
        except PostDeckException as e:
            _logger.error("JWT_SECRET_KEY environment variable okunamadı", extra={"error": str(e)})
            raise JWTConfigurationError(
                config_key="JWT_SECRET_KEY",
                message="JWT_SECRET_KEY environment variable is required but not set",
                cause=e
            ) from e

        if not key:
            _logger.error("JWT_SECRET_KEY environment variable tanımlı değil")
            raise JWTConfigurationError(
                config_key="JWT_SECRET_KEY",
                message="JWT_SECRET_KEY environment variable is required but not set"
            )
        _jwt_secret_key = key

    return _jwt_secret_key


def _get_jwt_algorithm() -> str:
    global _jwt_algorithm

    if _jwt_algorithm is None:
        try:
            algorithm = ConfigurationHandler.get_value_as_str("JWT Settings", "algorithm", fallback="HS256")
        except PostDeckException as e:
            _logger.warning(
                "JWT algorithm configuration'dan okunamadı, varsayılan kullanılıyor",
                extra={"error": str(e), "default_algorithm": "HS256"}
            )
            algorithm = "HS256"
        _jwt_algorithm = algorithm or "HS256"

    return _jwt_algorithm


def _get_access_token_expire() -> timedelta:
    global _access_token_expire

    if _access_token_expire is None:
        try:
            days = ConfigurationHandler.get_value_as_int("JWT Settings", "access_token_expire_days", fallback=7)
        except PostDeckException as e:
            _logger.warning(
                "Access token süresi configuration'dan okunamadı, varsayılan kullanılıyor",
                extra={"error": str(e), "default_days": 7}
            )
            days = 7
        if not days or days <= 0:
            _logger.warning("Access token süresi geçersiz, varsayılan kullanılıyor: 7 gün")
            days = 7
        _access_token_expire = timedelta(days=days)

    return _access_token_expire


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(user_id: str, email: str, additional_claims: Optional[Dict[str, Any]] = None) -> Tuple[str, datetime]:
    """
    Kullanıcı için imzalı access token üretir.

    Payload: sub (user id), email, token_type, iat, nbf, exp.

    Returns:
        (token, expires_at)
    """
    now = _now()
    expires_at = now + _get_access_token_expire()

    payload = {
        "sub": user_id,
        "email": email,
        "token_type": ACCESS_TOKEN_TYPE,
        "iat": int(now.timestamp()),
        "nbf": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    if additional_claims:
        payload.update(additional_claims)

    token = jwt.encode(payload, _get_jwt_secret_key(), algorithm=_get_jwt_algorithm())
    _logger.info(
        "Access token oluşturuldu",
        extra={"user_id": user_id, "expires_at": expires_at.isoformat()}
    )
    return token, expires_at


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Access token'ı doğrular ve payload'ı döndürür.

    Raises:
        JWTExpiredError: exp geçmiş
        JWTMissingClaimError: sub/exp/iat eksik
        JWTTokenTypeError: token_type "access" değil
        JWTInvalidTokenError: imza, format veya diğer PyJWT hataları
    """
    if not token:
        raise JWTInvalidTokenError(reason="empty_token", message="Token is empty")

    try:
        payload = jwt.decode(
            token,
            _get_jwt_secret_key(),
            algorithms=[_get_jwt_algorithm()],
            options={"require": list(REQUIRED_CLAIMS)},
        )
    except jwt.ExpiredSignatureError as e:
        _logger.debug("Token süresi dolmuş")
        raise JWTExpiredError(cause=e) from e
    except jwt.MissingRequiredClaimError as e:
        _logger.warning("Token'da zorunlu claim eksik", extra={"missing_claim": e.claim})
        raise JWTMissingClaimError(claim_name=e.claim, cause=e) from e
    except jwt.InvalidTokenError as e:
        _logger.warning("Geçersiz token", extra={"error": str(e)})
        raise JWTInvalidTokenError(reason="invalid_token", message=f"Token is invalid: {e}", cause=e) from e

    actual_type = payload.get("token_type")
    if actual_type != ACCESS_TOKEN_TYPE:
        _logger.warning(
            "Token tipi uyuşmuyor",
            extra={"expected_type": ACCESS_TOKEN_TYPE, "actual_type": actual_type}
        )
        raise JWTTokenTypeError(expected_type=ACCESS_TOKEN_TYPE, actual_type=actual_type)

    return payload

