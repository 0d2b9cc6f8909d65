from typing import Optional, Union
from pydantic import BaseModel, Field


class UploadDto(BaseModel):
    """Tekil upload ile gönderilebilen opsiyonel metadata."""
    title: Optional[str] = Field(None, max_length=100, description="Başlık")
    description: Optional[str] = Field(None, max_length=250, description="Açıklama")


class InitChunkUploadRequest(BaseModel):
    filename: Optional[str] = None
    totalSize: Optional[int] = None
    totalChunks: Optional[int] = None
    mimeType: Optional[str] = None


class CompleteChunkUploadRequest(BaseModel):
    uploadId: Optional[str] = None


class UploadResponse(BaseModel):
    message: str
    path: str
    filename: str
    size: Union[int, str]
    title: Optional[str] = None
    description: Optional[str] = None


class InitChunkUploadResponse(BaseModel):
    uploadId: str


class ChunkUploadResponse(BaseModel):
    uploadId: str
    chunkIndex: int
    received: int
    total: int
