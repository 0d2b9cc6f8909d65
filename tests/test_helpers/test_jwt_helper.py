import pytest
import jwt
from datetime import datetime, timezone, timedelta
from unittest.mock import patch

from postdeck.utils.helpers import jwt_helper
from postdeck.utils.handlers import EnvironmentHandler, ConfigurationHandler
from postdeck.core.exceptions import (
    JWTConfigurationError,
    JWTExpiredError,
    JWTInvalidTokenError,
    JWTMissingClaimError,
    JWTTokenTypeError,
)

SECRET = "test_jwt_secret_key_for_testing_purposes_only_min_32_chars"


@pytest.fixture(autouse=True)
def reset_jwt_cache():
    """Reset the module-level cache variables in jwt_helper."""
    jwt_helper._jwt_secret_key = None
    jwt_helper._jwt_algorithm = None
    jwt_helper._access_token_expire = None
    yield
    jwt_helper._jwt_secret_key = None
    jwt_helper._jwt_algorithm = None
    jwt_helper._access_token_expire = None


def _encode(payload, secret=SECRET):
    return jwt.encode(payload, secret, algorithm="HS256")


def test_config_loading_from_settings():
    assert jwt_helper._get_jwt_secret_key() == SECRET
    assert jwt_helper._get_jwt_algorithm() == "HS256"
    assert jwt_helper._get_access_token_expire() == timedelta(days=7)


def test_config_loading_missing_secret():
    with patch.object(EnvironmentHandler, "get_value_as_str", return_value=None):
        with pytest.raises(JWTConfigurationError) as exc:
            jwt_helper._get_jwt_secret_key()
    assert exc.value.status_code == 500


def test_invalid_expire_days_falls_back_to_default():
    with patch.object(ConfigurationHandler, "get_value_as_int", return_value=0):
        assert jwt_helper._get_access_token_expire() == timedelta(days=7)


def test_create_and_decode_access_token():
    token, expires_at = jwt_helper.create_access_token(user_id="USR-1", email="ada@example.com")
    payload = jwt_helper.decode_access_token(token)

    assert payload["sub"] == "USR-1"
    assert payload["email"] == "ada@example.com"
    assert payload["token_type"] == "access"
    assert payload["exp"] == int(expires_at.timestamp())
    assert expires_at - datetime.now(timezone.utc) > timedelta(days=6)


def test_additional_claims_are_included():
    token, _ = jwt_helper.create_access_token("USR-1", "ada@example.com", additional_claims={"tenant_id": "TEN-1"})
    assert jwt_helper.decode_access_token(token)["tenant_id"] == "TEN-1"


def test_decode_expired_token():
    now = datetime.now(timezone.utc)
    token = _encode({
        "sub": "USR-1", "token_type": "access",
        "iat": int((now - timedelta(days=2)).timestamp()),
        "exp": int((now - timedelta(days=1)).timestamp()),
    })
    with pytest.raises(JWTExpiredError):
        jwt_helper.decode_access_token(token)


def test_decode_wrong_signature():
    token, _ = jwt_helper.create_access_token("USR-1", "ada@example.com")
    jwt_helper._jwt_secret_key = "another_secret_key_that_is_long_enough_123"
    with pytest.raises(JWTInvalidTokenError):
        jwt_helper.decode_access_token(token)


def test_decode_garbage_and_empty():
    with pytest.raises(JWTInvalidTokenError):
        jwt_helper.decode_access_token("not-a-jwt")
    with pytest.raises(JWTInvalidTokenError):
        jwt_helper.decode_access_token("")


def test_decode_missing_claim():
    now = datetime.now(timezone.utc)
    token = _encode({"token_type": "access", "iat": int(now.timestamp()),
                     "exp": int((now + timedelta(hours=1)).timestamp())})
    with pytest.raises(JWTMissingClaimError):
        jwt_helper.decode_access_token(token)


def test_decode_wrong_token_type():
    now = datetime.now(timezone.utc)
    token = _encode({"sub": "USR-1", "token_type": "refresh", "iat": int(now.timestamp()),
                     "exp": int((now + timedelta(hours=1)).timestamp())})
    with pytest.raises(JWTTokenTypeError):
        jwt_helper.decode_access_token(token)

