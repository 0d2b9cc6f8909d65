"""
Upload routes: tekil, çoklu ve chunked dosya yükleme. Tüm endpoint'ler JwtAuthGuard arkasındadır.
"""
import os
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from postdeck.api.schemas.upload import (
    UploadDto,
    InitChunkUploadRequest,
    CompleteChunkUploadRequest,
    UploadResponse,
    InitChunkUploadResponse,
    ChunkUploadResponse,
)
from postdeck.api.dependencies.auth import JwtAuthGuard, AuthenticatedUser
from postdeck.api.dependencies.service_providers import get_upload_service
from postdeck.domain.services import UploadService, IncomingFile
from postdeck.utils.handlers import ConfigurationHandler
from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions.services import (
    FileRequiredError,
    TooManyFilesError,
    ChunkUploadInvalidError,
)

logger = get_logger("upload_routes", parent_folder="api")

# Router seviyesindeki guard, form/body doğrulamasından önce çalışır.
# Endpoint'ler aynı instance'ı kullandığı için kullanıcı tek sefer çözülür.
require_jwt = JwtAuthGuard()

router = APIRouter(prefix="/upload", tags=["Upload"], dependencies=[Depends(require_jwt)])

DEFAULT_MAX_FILES = 10


def get_upload_metadata(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
) -> UploadDto:
    """Multipart form alanlarını UploadDto ile doğrular; hata 422 olarak döner."""
    try:
        return UploadDto(title=title, description=description)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False)) from e


def _to_incoming(upload: UploadFile, field_name: str) -> IncomingFile:
    size = upload.size
    if size is None:
        upload.file.seek(0, os.SEEK_END)
        size = upload.file.tell()
        upload.file.seek(0)

    return IncomingFile(
        field_name=field_name,
        original_name=upload.filename or "file",
        mime_type=upload.content_type or "application/octet-stream",
        size=size,
        stream=upload.file,
    )


@router.post(
    "/single",
    response_model=UploadResponse,
    summary="Tekil dosya yükleme",
    description="Görsel (max 8MB) veya video (max 300MB) yükler."
)
async def upload_single(
    file: Optional[UploadFile] = File(None),
    metadata: UploadDto = Depends(get_upload_metadata),
    current_user: AuthenticatedUser = Depends(require_jwt),
    upload_service: UploadService = Depends(get_upload_service),
):
    if file is None:
        raise FileRequiredError()

    incoming = _to_incoming(file, "file")
    try:
        result = upload_service.handle_file_upload(incoming)
    except Exception as e:
        logger.error(f"Single upload failed: {e}", extra={"user_id": current_user["user_id"]})
        raise

    return UploadResponse(
        message=result["message"],
        path=result["file_paths"],
        filename=incoming.original_name,
        size=incoming.size,
        title=metadata.title,
        description=metadata.description,
    )


@router.post(
    "/multiple",
    response_model=UploadResponse,
    summary="Çoklu dosya yükleme",
)
async def upload_multiple(
    file: Optional[List[UploadFile]] = File(None),
    current_user: AuthenticatedUser = Depends(require_jwt),
    upload_service: UploadService = Depends(get_upload_service),
):
    if not file:
        raise FileRequiredError()

    max_files = ConfigurationHandler.get_value_as_int("Upload", "max_files", fallback=DEFAULT_MAX_FILES)
    if len(file) > max_files:
        raise TooManyFilesError(count=len(file), max_count=max_files)

    try:
        result = upload_service.handle_file_upload([_to_incoming(f, "file") for f in file])
    except Exception as e:
        logger.error(f"Multiple upload failed: {e}", extra={"user_id": current_user["user_id"]})
        raise

    return UploadResponse(
        message=result["message"],
        path=result["file_paths"],
        filename=result["filenames"],
        size=result["sizes"],
    )


@router.post(
    "/chunk/init",
    response_model=InitChunkUploadResponse,
    summary="Chunked upload başlat",
)
async def init_chunk_upload(
    request: InitChunkUploadRequest,
    current_user: AuthenticatedUser = Depends(require_jwt),
    upload_service: UploadService = Depends(get_upload_service),
):
    upload_id = upload_service.init_chunk_upload(
        request.filename,
        request.totalSize,
        request.totalChunks,
        request.mimeType or "application/octet-stream",
    )
    return InitChunkUploadResponse(uploadId=upload_id)


@router.post(
    "/chunk",
    response_model=ChunkUploadResponse,
    summary="Chunk yükle",
)
async def upload_chunk(
    chunk: Optional[UploadFile] = File(None),
    uploadId: Optional[str] = Form(None),
    chunkIndex: Optional[str] = Form(None),
    current_user: AuthenticatedUser = Depends(require_jwt),
    upload_service: UploadService = Depends(get_upload_service),
):
    if chunk is None:
        raise FileRequiredError(message="Chunk file is required")
    if not uploadId:
        raise ChunkUploadInvalidError(message="uploadId is required")
    if chunkIndex is None:
        raise ChunkUploadInvalidError(message="chunkIndex is required")

    try:
        index = int(chunkIndex)
    except ValueError as e:
        raise ChunkUploadInvalidError(message="chunkIndex must be a number", cause=e) from e

    data = await chunk.read()
    return ChunkUploadResponse(**upload_service.save_chunk(uploadId, index, data))


@router.post(
    "/chunk/complete",
    response_model=UploadResponse,
    summary="Chunked upload tamamla",
    description="Tüm parçaları sırayla birleştirir ve dosyayı doğrular."
)
async def complete_chunk_upload(
    request: CompleteChunkUploadRequest,
    current_user: AuthenticatedUser = Depends(require_jwt),
    upload_service: UploadService = Depends(get_upload_service),
):
    if not request.uploadId:
        raise ChunkUploadInvalidError(message="uploadId is required")

    try:
        result = upload_service.complete_chunk_upload(request.uploadId)
    except Exception as e:
        logger.error(f"Chunk upload completion failed: {e}", extra={"upload_id": request.uploadId})
        raise

    return UploadResponse(
        message="File assembled successfully",
        path=result["public_url"],
        filename=result["filename"],
        size=result["size"],
    )
