"""
Authentication schemas for request/response validation.
"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, EmailStr, Field, field_validator


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class RegisterRequest(BaseModel):
    """User registration request schema."""
    email: EmailStr = Field(..., description="E-posta adresi")
    password: str = Field(..., min_length=8, description="Şifre")
    first_name: str = Field(..., min_length=1, max_length=100, description="Ad")
    last_name: str = Field(..., min_length=1, max_length=100, description="Soyad")
    organization_name: str = Field(..., min_length=1, max_length=255, description="Organizasyon adı")


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="E-posta adresi")
    password: str = Field(..., description="Şifre")


class VerifyEmailRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Email doğrulama tokeni")


class EmailRequest(BaseModel):
    """Şifre sıfırlama talebi ve doğrulama e-postası yeniden gönderimi."""
    email: EmailStr = Field(..., description="E-posta adresi")


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Şifre sıfırlama tokeni")
    new_password: str = Field(..., description="Yeni şifre")


class AcceptInvitationRequest(BaseModel):
    """Davet kabulü: REST body ve GraphQL input aynı kurallarla doğrulanır."""
    token: str = Field(..., description="Davet tokeni")
    email: EmailStr = Field(..., description="Davet edilen e-posta adresi")
    first_name: str = Field(..., description="Ad")
    last_name: str = Field(..., description="Soyad")
    password: str = Field(..., min_length=8, description="Şifre")

    @field_validator("token", "first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Bu alan boş olamaz")
        return v


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class MessageResponse(BaseModel):
    success: bool = True
    message: str
    data: Optional[Dict[str, Any]] = None


class TokenResponse(BaseModel):
    """Login ve davet kabulü yanıtı: access token + kullanıcı."""
    success: bool = True
    message: str
    data: Dict[str, Any]
