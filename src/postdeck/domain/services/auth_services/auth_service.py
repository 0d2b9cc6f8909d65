from typing import Dict, Any

from postdeck.domain.repositories import RepositoryRegistry
from postdeck.domain.models import Tenant, UserRole, InvitationStatus
from postdeck.domain.services.email_services import EmailService
from postdeck.infrastructure.database import with_transaction, with_readonly_session
from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import PostDeckException
from postdeck.utils.handlers import ConfigurationHandler
from postdeck.utils.helpers.crypto_helper import hash_password, verify_password
from postdeck.utils.helpers.jwt_helper import create_access_token
from postdeck.utils.helpers.token_helper import is_token_expired, generate_short_suffix
from postdeck.core.exceptions.services import (
    UserAlreadyExistsError,
    InvalidCredentialsError,
    EmailNotVerifiedError,
    EmailVerificationTokenInvalidError,
    EmailVerificationTokenExpiredError,
    EmailAlreadyVerifiedError,
    PasswordResetTokenInvalidError,
    PasswordResetTokenExpiredError,
    WeakPasswordError,
    UserNotFoundError,
    UserUnauthorizedError,
    InvitationTokenInvalidError,
    InvitationNoLongerValidError,
    InvitationExpiredError,
    InvitationEmailMismatchError,
)

# Domain servis logger'ı (logs/services/Auth Service/service.log)
logger = get_logger("Auth Service", parent_folder="services")

MIN_PASSWORD_LENGTH = 8


def _auth_setting(key: str, fallback: int) -> int:
    return ConfigurationHandler.get_value_as_int("Auth", key, fallback=fallback)


class AuthService:
    _user_repo = RepositoryRegistry().user_repository
    _tenant_repo = RepositoryRegistry().tenant_repository
    _invitation_repo = RepositoryRegistry().user_invitation_repository

    @classmethod
    def _generate_subdomain(cls, session, organization_name: str) -> str:
        subdomain = Tenant.slugify(organization_name)
        if cls._tenant_repo.subdomain_exists(session, subdomain):
            subdomain = f"{subdomain}-{generate_short_suffix(4)}"
        return subdomain

    @classmethod
    def _issue_access_token(cls, user) -> Dict[str, Any]:
        access_token, expires_at = create_access_token(user_id=user.id, email=user.email)
        return {"access_token": access_token, "expires_at": expires_at.isoformat()}

    @classmethod
    @with_transaction(manager=None)
    def register(cls, session, *, email: str, password: str, first_name: str, last_name: str,
                 organization_name: str) -> Dict[str, Any]:

        logger.info("Kullanıcı kaydı başlatıldı", extra={"email": email, "organization_name": organization_name})

        if cls._user_repo.get_by_email(session, email=email):
            logger.warning("E-posta zaten kayıtlı", extra={"email": email})
            raise UserAlreadyExistsError(email=email)

        tenant = cls._tenant_repo.create(
            session,
            name=organization_name,
            subdomain=cls._generate_subdomain(session, organization_name),
        )

        user = cls._user_repo.create(
            session,
            email=email,
            password_hash=hash_password(password),
            first_name=first_name,
            last_name=last_name,
            is_verified=False,
            tenant_id=tenant.id,
            role=UserRole.ADMIN,
        )
        verification_token = user.generate_verification_token(
            hours=_auth_setting("verification_token_expire_hours", 24)
        )
        session.flush()

        try:
            EmailService.send_verification_email(user.email, user.full_name, verification_token)
        except PostDeckException as e:
            logger.error(
                "Doğrulama e-postası gönderilemedi, kayıt devam ediyor",
                extra={"user_id": user.id, "email": email, "error_code": e.error_code}
            )

        logger.info("Kullanıcı kaydı tamamlandı", extra={"user_id": user.id, "tenant_id": tenant.id})

        return {
            "message": "Registration successful! Please check your email to verify your account.",
            "data": {
                "id": user.id,
                "email": user.email,
                "tenant_id": tenant.id,
                "subdomain": tenant.subdomain,
            }
        }

    @classmethod
    @with_transaction(manager=None)
    def verify_email(cls, session, *, token: str) -> Dict[str, Any]:

        logger.info("E-posta doğrulama işlemi başlatıldı")

        user = cls._user_repo.get_by_verification_token(session, token=token)
        if not user:
            logger.warning("Doğrulama tokeni bulunamadı")
            raise EmailVerificationTokenInvalidError()

        if is_token_expired(user.verification_token_expiry):
            logger.warning("Doğrulama tokeni süresi dolmuş", extra={"user_id": user.id})
            raise EmailVerificationTokenExpiredError()

        if user.is_verified:
            logger.warning("E-posta zaten doğrulanmış", extra={"user_id": user.id})
            raise EmailAlreadyVerifiedError()

        user.mark_as_verified()
        session.flush()

        try:
            EmailService.send_welcome_email(user.email, user.full_name)
        except PostDeckException as e:
            logger.error("Hoş geldin e-postası gönderilemedi", extra={"user_id": user.id, "error_code": e.error_code})

        logger.info("E-posta doğrulama tamamlandı", extra={"user_id": user.id})

        return {
            "message": "Email verified successfully! You can now login.",
            "data": {"id": user.id, "email": user.email, "is_verified": user.is_verified}
        }

    @classmethod
    @with_readonly_session(manager=None)
    def login(cls, session, *, email: str, password: str) -> Dict[str, Any]:

        logger.info("Giriş denemesi", extra={"email": email})

        user = cls._user_repo.get_by_email(session, email=email)
        if not user:
            logger.warning("Giriş başarısız: kullanıcı bulunamadı", extra={"email": email})
            raise InvalidCredentialsError()

        if not user.is_verified:
            logger.warning("Giriş başarısız: e-posta doğrulanmamış", extra={"user_id": user.id})
            raise EmailNotVerifiedError()

        if not verify_password(password, user.password_hash):
            logger.warning("Giriş başarısız: hatalı şifre", extra={"user_id": user.id})
            raise InvalidCredentialsError()

        token_data = cls._issue_access_token(user)
        logger.info("Giriş başarılı", extra={"user_id": user.id, "tenant_id": user.tenant_id})

        return {
            "message": "Login successful",
            "data": {**token_data, "user": user.to_dict()}
        }

    @classmethod
    @with_transaction(manager=None)
    def request_password_reset(cls, session, *, email: str) -> Dict[str, Any]:
        response = {
            "message": "If that email exists in our system, a password reset link has been sent.",
            "data": {"email": email}
        }

        user = cls._user_repo.get_by_email(session, email=email)
        if not user:
            # Kullanıcının varlığı açığa çıkarılmaz
            logger.info("Şifre sıfırlama: e-posta kayıtlı değil", extra={"email": email})
            return response

        reset_token = user.generate_reset_token(hours=_auth_setting("password_reset_expire_hours", 1))
        session.flush()

        try:
            EmailService.send_password_reset_email(user.email, user.full_name, reset_token)
        except PostDeckException as e:
            logger.error("Şifre sıfırlama e-postası gönderilemedi", extra={"user_id": user.id, "error_code": e.error_code})

        logger.info("Şifre sıfırlama tokeni oluşturuldu", extra={"user_id": user.id})
        return response

    @classmethod
    @with_transaction(manager=None)
    def reset_password(cls, session, *, token: str, new_password: str) -> Dict[str, Any]:

        user = cls._user_repo.get_by_reset_token(session, token=token)
        if not user:
            logger.warning("Şifre sıfırlama tokeni bulunamadı")
            raise PasswordResetTokenInvalidError()

        if is_token_expired(user.reset_token_expiry):
            logger.warning("Şifre sıfırlama tokeni süresi dolmuş", extra={"user_id": user.id})
            raise PasswordResetTokenExpiredError()

        if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            raise WeakPasswordError()

        user.password_hash = hash_password(new_password)
        user.reset_token = None
        user.reset_token_expiry = None
        session.flush()

        logger.info("Şifre sıfırlandı", extra={"user_id": user.id})

        return {
            "message": "Password reset successfully! You can now login with your new password.",
            "data": {"id": user.id}
        }

    @classmethod
    @with_transaction(manager=None)
    def resend_verification_email(cls, session, *, email: str) -> Dict[str, Any]:

        user = cls._user_repo.get_by_email(session, email=email)
        if not user:
            logger.warning("Doğrulama e-postası: kullanıcı bulunamadı", extra={"email": email})
            raise UserNotFoundError()

        if user.is_verified:
            raise EmailAlreadyVerifiedError()

        verification_token = user.generate_verification_token(
            hours=_auth_setting("verification_token_expire_hours", 24)
        )
        session.flush()

        try:
            EmailService.send_verification_email(user.email, user.full_name, verification_token)
        except PostDeckException as e:
            logger.error("Doğrulama e-postası yeniden gönderilemedi", extra={"user_id": user.id, "error_code": e.error_code})

        return {
            "message": "Verification email sent! Please check your inbox.",
            "data": {"email": user.email}
        }

    @classmethod
    @with_readonly_session(manager=None)
    def validate_user(cls, session, *, user_id: str) -> Dict[str, Any]:
        """Token'daki ``sub`` için kullanıcıyı yükler; bulunamaz veya pasifse 401."""
        user = cls._user_repo.get(session, user_id)
        if not user:
            logger.warning("Token kullanıcısı bulunamadı", extra={"user_id": user_id})
            raise UserUnauthorizedError()

        if not user.is_active:
            logger.warning("Pasif kullanıcı erişim denemesi", extra={"user_id": user_id})
            raise UserUnauthorizedError(message="User is inactive")

        return user.to_dict()

    @classmethod
    @with_transaction(manager=None)
    def accept_invitation(cls, session, *, token: str, email: str, first_name: str, last_name: str,
                          password: str) -> Dict[str, Any]:

        logger.info("Davet kabul işlemi başlatıldı", extra={"email": email})

        invitation = cls._invitation_repo.get_by_token(session, token=token)
        if not invitation:
            logger.warning("Davet tokeni bulunamadı")
            raise InvitationTokenInvalidError()

        if invitation.status != InvitationStatus.PENDING:
            logger.warning(
                "Davet artık geçerli değil",
                extra={"invitation_id": invitation.id, "status": invitation.status.value}
            )
            raise InvitationNoLongerValidError(status=invitation.status.value)

        if invitation.is_expired():
            invitation.mark_as_expired()
            # EXPIRED durumu hata fırlatılmadan önce kalıcı olmalı
            session.commit()
            logger.warning("Davet süresi dolmuş", extra={"invitation_id": invitation.id})
            raise InvitationExpiredError()

        if invitation.email.lower() != email.lower():
            logger.warning("Davet e-postası eşleşmiyor", extra={"invitation_id": invitation.id, "email": email})
            raise InvitationEmailMismatchError()

        if cls._user_repo.get_by_email(session, email=email):
            logger.warning("E-posta zaten kayıtlı", extra={"email": email})
            raise UserAlreadyExistsError(email=email)

        user = cls._user_repo.create(
            session,
            email=invitation.email,
            password_hash=hash_password(password),
            first_name=first_name,
            last_name=last_name,
            is_verified=True,
            tenant_id=invitation.tenant_id,
            role=invitation.role,
        )
        invitation.status = InvitationStatus.ACCEPTED
        session.flush()

        token_data = cls._issue_access_token(user)
        logger.info(
            "Davet kabul edildi, kullanıcı oluşturuldu",
            extra={"user_id": user.id, "invitation_id": invitation.id, "tenant_id": user.tenant_id}
        )

        return {
            "message": "Account created successfully! You are now logged in.",
            "data": {**token_data, "user": user.to_dict()}
        }
