"""
Authentication routes: kayıt, giriş, e-posta doğrulama, şifre sıfırlama ve davet kabulü.
"""
from fastapi import APIRouter, Depends, status

from postdeck.api.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    VerifyEmailRequest,
    EmailRequest,
    ResetPasswordRequest,
    AcceptInvitationRequest,
    MessageResponse,
    TokenResponse,
)
from postdeck.api.dependencies.auth import JwtAuthGuard, AuthenticatedUser
from postdeck.api.dependencies.service_providers import get_auth_service
from postdeck.domain.services import AuthService
from postdeck.core.postdeck_logger import get_logger

# API katmanı auth router logger'ı (logs/api/auth_routes/service.log)
logger = get_logger("auth_routes", parent_folder="api")

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Kullanıcı kaydı",
    description="Organizasyon ve ADMIN kullanıcı oluşturur, doğrulama e-postası gönderir."
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        result = auth_service.register(
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            organization_name=request.organization_name,
        )
        return MessageResponse(**result)
    except Exception as e:
        logger.error(f"Registration failed: {e}", exc_info=True)
        raise


@router.post(
    "/login",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Kullanıcı girişi",
    description="Doğrulanmış kullanıcı için access token döner."
)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        result = auth_service.login(email=request.email, password=request.password)
        return TokenResponse(**result)
    except Exception as e:
        logger.error(f"Login failed: {e}")
        raise


@router.post(
    "/verify-email",
    response_model=MessageResponse,
    summary="E-posta doğrulama",
)
async def verify_email(
    request: VerifyEmailRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        return MessageResponse(**auth_service.verify_email(token=request.token))
    except Exception as e:
        logger.error(f"Email verification failed: {e}")
        raise


@router.post(
    "/resend-verification",
    response_model=MessageResponse,
    summary="Doğrulama e-postasını yeniden gönder",
)
async def resend_verification(
    request: EmailRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        return MessageResponse(**auth_service.resend_verification_email(email=request.email))
    except Exception as e:
        logger.error(f"Resend verification failed: {e}")
        raise


@router.post(
    "/request-password-reset",
    response_model=MessageResponse,
    summary="Şifre sıfırlama talebi",
    description="E-posta kayıtlı olsun ya da olmasın aynı yanıtı döner."
)
async def request_password_reset(
    request: EmailRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        return MessageResponse(**auth_service.request_password_reset(email=request.email))
    except Exception as e:
        logger.error(f"Password reset request failed: {e}")
        raise


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    summary="Şifre sıfırlama",
)
async def reset_password(
    request: ResetPasswordRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        return MessageResponse(**auth_service.reset_password(token=request.token, new_password=request.new_password))
    except Exception as e:
        logger.error(f"Password reset failed: {e}")
        raise


@router.post(
    "/accept-invitation",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Davet kabulü",
    description="Davet tokeni ile hesap oluşturur ve access token döner."
)
async def accept_invitation(
    request: AcceptInvitationRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        result = auth_service.accept_invitation(
            token=request.token,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
        )
        return TokenResponse(**result)
    except Exception as e:
        logger.error(f"Accept invitation failed: {e}")
        raise


@router.get(
    "/me",
    response_model=MessageResponse,
    summary="Mevcut kullanıcı",
)
async def me(current_user: AuthenticatedUser = Depends(JwtAuthGuard())):
    return MessageResponse(message="Authenticated", data=dict(current_user))
