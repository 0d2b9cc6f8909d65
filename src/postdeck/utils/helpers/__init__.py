from .crypto_helper import hash_password, verify_password
from .jwt_helper import (
    create_access_token,
    decode_access_token,
)
from .token_helper import (
    generate_uuid_token,
    generate_short_suffix,
    is_token_expired,
    get_expires_at,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "generate_uuid_token",
    "generate_short_suffix",
    "is_token_expired",
    "get_expires_at",
]
