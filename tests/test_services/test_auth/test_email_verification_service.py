from datetime import datetime, timezone, timedelta

import pytest

from postdeck.domain.models import User
from postdeck.domain.services import AuthService
from postdeck.core.exceptions.services import (
    EmailVerificationTokenInvalidError,
    EmailVerificationTokenExpiredError,
    EmailAlreadyVerifiedError,
    UserNotFoundError,
)


def _with_verification_token(db, user_id, expiry_delta=timedelta(hours=1), verified=False):
    with db.engine.session_context() as session:
        user = session.get(User, user_id)
        user.verification_token = f"verify-{user_id}"
        user.verification_token_expiry = datetime.now(timezone.utc) + expiry_delta
        user.is_verified = verified
        return user.verification_token


def test_verify_email_success(db, make_user, mail, load):
    user = make_user(is_verified=False)
    token = _with_verification_token(db, user.id)

    result = AuthService.verify_email(token=token)

    assert result["message"] == "Email verified successfully! You can now login."
    reloaded = load(User, user.id)
    assert reloaded.is_verified is True
    assert reloaded.verification_token is None
    mail.welcome.assert_called_once_with("owner@acme.example.com", "Ada Lovelace")


def test_verify_email_invalid_token(db):
    with pytest.raises(EmailVerificationTokenInvalidError):
        AuthService.verify_email(token="nope")


def test_verify_email_expired_token(db, make_user):
    user = make_user(is_verified=False)
    token = _with_verification_token(db, user.id, expiry_delta=timedelta(minutes=-1))

    with pytest.raises(EmailVerificationTokenExpiredError):
        AuthService.verify_email(token=token)


def test_verify_email_already_verified(db, make_user):
    user = make_user(is_verified=True)
    token = _with_verification_token(db, user.id, verified=True)

    with pytest.raises(EmailAlreadyVerifiedError):
        AuthService.verify_email(token=token)


def test_resend_verification_email(db, make_user, mail, load):
    user = make_user(is_verified=False)

    result = AuthService.resend_verification_email(email="owner@acme.example.com")

    assert result["message"] == "Verification email sent! Please check your inbox."
    token = load(User, user.id).verification_token
    mail.verification.assert_called_once_with("owner@acme.example.com", "Ada Lovelace", token)


def test_resend_verification_errors(db, make_user):
    with pytest.raises(UserNotFoundError):
        AuthService.resend_verification_email(email="ghost@acme.example.com")

    make_user(is_verified=True)
    with pytest.raises(EmailAlreadyVerifiedError):
        AuthService.resend_verification_email(email="owner@acme.example.com")
