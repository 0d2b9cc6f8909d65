from typing import Optional, Dict, Any
from ..base import PostDeckException


class UploadServiceException(PostDeckException):
    status_code: int = 400
    error_code: str = "UPLOAD_ERROR"
    error_message: str = "Upload error occurred"

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class FileRequiredError(UploadServiceException):
    error_code = "FILE_REQUIRED"
    error_message = "File is required"


class InvalidFileTypeError(UploadServiceException):
    error_code = "INVALID_FILE_TYPE"

    def __init__(self, mime_type: str, **kwargs):
        super().__init__(
            message=(
                f"Invalid file type: {mime_type}. "
                "Allowed types: JPEG, PNG, WEBP (images), MP4, MOV, WebM, AVI (videos)."
            ),
            error_details={"mime_type": mime_type},
            **kwargs,
        )


class FileTooLargeError(UploadServiceException):
    error_code = "FILE_TOO_LARGE"

    def __init__(self, size: int, max_size: int, is_video: bool, **kwargs):
        mb = 1024 * 1024
        super().__init__(
            message=(
                f"File too large: {size / mb:.2f}MB. "
                f"Max allowed is {max_size // mb}MB for {'videos' if is_video else 'images'}."
            ),
            error_details={"size": size, "max_size": max_size},
            **kwargs,
        )


class TooManyFilesError(UploadServiceException):
    error_code = "TOO_MANY_FILES"

    def __init__(self, count: int, max_count: int, **kwargs):
        super().__init__(
            message=f"Too many files: {count}. Max allowed is {max_count}.",
            error_details={"count": count, "max_count": max_count},
            **kwargs,
        )


class ChunkUploadNotFoundError(UploadServiceException):
    status_code = 404
    error_code = "CHUNK_UPLOAD_NOT_FOUND"
    error_message = "Upload session not found"

    def __init__(self, upload_id: str, **kwargs):
        super().__init__(error_details={"upload_id": upload_id}, **kwargs)


class ChunkUploadInvalidError(UploadServiceException):
    """Geçersiz chunk index, boyut veya init parametreleri."""

    error_code = "CHUNK_UPLOAD_INVALID"
    error_message = "Invalid chunk upload request"


class ChunkUploadIncompleteError(UploadServiceException):
    error_code = "CHUNK_UPLOAD_INCOMPLETE"
    error_message = "Not all chunks have been uploaded"

    # Mesajda ve detaylarda en fazla bu kadar eksik index listelenir
    MAX_REPORTED = 20

    def __init__(self, upload_id: str, missing: list, **kwargs):
        reported = list(missing[:self.MAX_REPORTED])
        listed = ", ".join(str(index) for index in reported)
        if len(missing) > len(reported):
            listed += ", ..."
        super().__init__(
            message=f"Missing {len(missing)} chunk(s) for upload {upload_id}: [{listed}]",
            error_details={"upload_id": upload_id, "missing_chunks": reported, "missing_count": len(missing)},
            **kwargs,
        )
