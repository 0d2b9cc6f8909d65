from .file_validation import (
    ALLOWED_IMAGE_TYPES,
    ALLOWED_VIDEO_TYPES,
    MAX_IMAGE_SIZE,
    MAX_VIDEO_SIZE,
    validate_file,
    validate_files,
)
from .upload_service import UploadService, IncomingFile

__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "ALLOWED_VIDEO_TYPES",
    "MAX_IMAGE_SIZE",
    "MAX_VIDEO_SIZE",
    "validate_file",
    "validate_files",
    "UploadService",
    "IncomingFile",
]
