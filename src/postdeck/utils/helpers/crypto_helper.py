import bcrypt

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import PasswordHashingError


BCRYPT_ROUNDS = 12

_logger = get_logger("crypto_helper", parent_folder="utils")


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    if not password:
        raise PasswordHashingError(rounds=rounds, message="Password cannot be empty")
    try:
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    except ValueError as e:
        _logger.error("Şifre hashlenemedi", extra={"rounds": rounds, "error": str(e)})
        raise PasswordHashingError(rounds=rounds, cause=e) from e


def verify_password(password: str, hashed_password: str) -> bool:
    if not password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError as e:
        # Bozuk hash: doğrulama başarısız sayılır
        _logger.warning("Şifre doğrulanamadı, hash formatı geçersiz", extra={"error": str(e)})
        return False
