from types import SimpleNamespace

import pytest

from postdeck.domain.services.upload_services.file_validation import (
    MB,
    MAX_IMAGE_SIZE,
    MAX_VIDEO_SIZE,
    validate_file,
    validate_files,
    max_size_for,
)
from postdeck.core.exceptions.services import (
    FileRequiredError,
    InvalidFileTypeError,
    FileTooLargeError,
)


def _file(mime_type, size):
    return SimpleNamespace(mime_type=mime_type, size=size)


@pytest.mark.parametrize("files", [None, []])
def test_validate_files_requires_files(files):
    with pytest.raises(FileRequiredError) as exc:
        validate_files(files)
    assert exc.value.status_code == 400


@pytest.mark.parametrize("mime_type", ["image/jpeg", "image/jpg", "image/png", "image/webp"])
def test_images_up_to_limit_are_accepted(mime_type):
    validate_file(mime_type, MAX_IMAGE_SIZE)


@pytest.mark.parametrize("mime_type", ["video/mp4", "video/quicktime", "video/webm", "video/x-msvideo"])
def test_videos_up_to_limit_are_accepted(mime_type):
    validate_file(mime_type, MAX_VIDEO_SIZE)


def test_limits():
    assert max_size_for("image/png") == 8 * MB
    assert max_size_for("video/mp4") == 300 * MB


def test_image_over_limit_rejected():
    with pytest.raises(FileTooLargeError) as exc:
        validate_file("image/png", MAX_IMAGE_SIZE + 1)

    assert "Max allowed is 8MB for images" in exc.value.error_message
    assert exc.value.error_details["max_size"] == MAX_IMAGE_SIZE


def test_video_over_limit_rejected():
    with pytest.raises(FileTooLargeError) as exc:
        validate_file("video/mp4", MAX_VIDEO_SIZE + 1)
    assert "Max allowed is 300MB for videos" in exc.value.error_message


def test_unknown_type_rejected():
    with pytest.raises(InvalidFileTypeError) as exc:
        validate_file("application/pdf", 10)

    assert exc.value.error_code == "INVALID_FILE_TYPE"
    assert exc.value.error_message.startswith("Invalid file type: application/pdf.")


def test_validate_files_stops_at_first_error():
    files = [_file("image/png", 10), _file("text/plain", 10), _file("image/png", MAX_IMAGE_SIZE + 1)]

    with pytest.raises(InvalidFileTypeError):
        validate_files(files)
