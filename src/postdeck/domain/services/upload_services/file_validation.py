"""Yüklenen dosyalar için MIME tipi ve boyut kontrolü."""

from typing import Optional, Sequence, Protocol

from postdeck.core.exceptions.services import (
    FileRequiredError,
    InvalidFileTypeError,
    FileTooLargeError,
)


MB = 1024 * 1024

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/jpg")
ALLOWED_VIDEO_TYPES = ("video/mp4", "video/quicktime", "video/webm", "video/x-msvideo")
ALLOWED_TYPES = ALLOWED_IMAGE_TYPES + ALLOWED_VIDEO_TYPES

MAX_IMAGE_SIZE = 8 * MB
MAX_VIDEO_SIZE = 300 * MB


class FileLike(Protocol):
    mime_type: str
    size: int


def is_video(mime_type: str) -> bool:
    return mime_type in ALLOWED_VIDEO_TYPES


def max_size_for(mime_type: str) -> int:
    return MAX_VIDEO_SIZE if is_video(mime_type) else MAX_IMAGE_SIZE


def validate_file(mime_type: str, size: int) -> None:
    if mime_type not in ALLOWED_TYPES:
        raise InvalidFileTypeError(mime_type=mime_type)

    max_size = max_size_for(mime_type)
    if size > max_size:
        raise FileTooLargeError(size=size, max_size=max_size, is_video=is_video(mime_type))


def validate_files(files: Optional[Sequence[FileLike]]) -> None:
    """
    Tüm dosyaları sırayla kontrol eder, ilk hatada durur.

    Raises:
        FileRequiredError: dosya yok
        InvalidFileTypeError: izin verilmeyen MIME tipi
        FileTooLargeError: görsel 8MB, video 300MB sınırı aşıldı
    """
    if not files:
        raise FileRequiredError()

    for file in files:
        validate_file(file.mime_type, file.size)
