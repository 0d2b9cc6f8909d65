"""
API schemas for request/response validation.
"""
from .auth import (
    RegisterRequest,
    LoginRequest,
    VerifyEmailRequest,
    EmailRequest,
    ResetPasswordRequest,
    AcceptInvitationRequest,
    MessageResponse,
    TokenResponse,
)
from .upload import (
    UploadDto,
    InitChunkUploadRequest,
    CompleteChunkUploadRequest,
    UploadResponse,
    InitChunkUploadResponse,
    ChunkUploadResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "VerifyEmailRequest",
    "EmailRequest",
    "ResetPasswordRequest",
    "AcceptInvitationRequest",
    "MessageResponse",
    "TokenResponse",
    "UploadDto",
    "InitChunkUploadRequest",
    "CompleteChunkUploadRequest",
    "UploadResponse",
    "InitChunkUploadResponse",
    "ChunkUploadResponse",
]
