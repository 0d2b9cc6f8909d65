import pytest

from postdeck.utils.helpers import crypto_helper
from postdeck.core.exceptions import PasswordHashingError


def test_hash_and_verify_password():
    hashed = crypto_helper.hash_password("Str0ngPass!", rounds=4)

    assert hashed != "Str0ngPass!"
    assert hashed.startswith("$2")
    assert crypto_helper.verify_password("Str0ngPass!", hashed) is True
    assert crypto_helper.verify_password("wrong-pass", hashed) is False


def test_hash_is_salted():
    assert crypto_helper.hash_password("same", rounds=4) != crypto_helper.hash_password("same", rounds=4)


def test_hash_empty_password_raises():
    with pytest.raises(PasswordHashingError):
        crypto_helper.hash_password("")


def test_verify_with_missing_or_corrupt_hash():
    assert crypto_helper.verify_password("x", None) is False
    assert crypto_helper.verify_password("", "$2b$04$abc") is False
    assert crypto_helper.verify_password("x", "not-a-bcrypt-hash") is False
