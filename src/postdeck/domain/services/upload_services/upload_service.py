"""
Upload Service
==============

Dosyalar UPLOAD_DIR altına yazılır ve PUBLIC_BASE_URL ile public URL üretilir.

Chunked upload akışı:
    1. init_chunk_upload  -> {UPLOAD_DIR}/.chunks/{upload_id}/meta.json
    2. save_chunk         -> {UPLOAD_DIR}/.chunks/{upload_id}/{index}.part
    3. complete_chunk_upload -> parçalar sırayla birleştirilir, doğrulanır, geçici dizin silinir
"""

import json
import mimetypes
import os
import random
import shutil
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Sequence, Union

from postdeck.core.postdeck_logger import get_logger
from postdeck.utils.handlers import EnvironmentHandler, ConfigurationHandler
from postdeck.core.exceptions.services import (
    ChunkUploadNotFoundError,
    ChunkUploadInvalidError,
    ChunkUploadIncompleteError,
)
from .file_validation import MB, validate_file, validate_files


DEFAULT_UPLOAD_DIR = "/var/www/uploads"
DEFAULT_PUBLIC_BASE_URL = "https://cdn.seninsite.com/uploads"
DEFAULT_MAX_CHUNK_SIZE_MB = 60
DEFAULT_MAX_CHUNKS = 10_000
DEFAULT_MIME_TYPE = "application/octet-stream"
CHUNKS_DIR_NAME = ".chunks"
META_FILE_NAME = "meta.json"
COPY_BUFFER_SIZE = 1024 * 1024

# logs/services/Upload Service/service.log
logger = get_logger("Upload Service", parent_folder="services")


@dataclass
class IncomingFile:
    """HTTP katmanından gelen, henüz diske yazılmamış dosya."""
    field_name: str
    original_name: str
    mime_type: str
    size: int
    stream: BinaryIO


class UploadService:

    # ---- Settings ---- #

    @classmethod
    def get_upload_dir(cls) -> Path:
        upload_dir = Path(EnvironmentHandler.get_value_as_str("UPLOAD_DIR", default=DEFAULT_UPLOAD_DIR))
        if not upload_dir.exists():
            upload_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"Upload dizini oluşturuldu: {upload_dir}")
        return upload_dir

    @classmethod
    def get_public_base_url(cls) -> str:
        return EnvironmentHandler.get_value_as_str("PUBLIC_BASE_URL", default=DEFAULT_PUBLIC_BASE_URL).rstrip("/")

    @classmethod
    def get_max_chunk_size(cls) -> int:
        size_mb = ConfigurationHandler.get_value_as_int("Upload", "max_chunk_size_mb", fallback=DEFAULT_MAX_CHUNK_SIZE_MB)
        return size_mb * MB

    @classmethod
    def get_max_chunks(cls) -> int:
        return ConfigurationHandler.get_value_as_int("Upload", "max_chunks", fallback=DEFAULT_MAX_CHUNKS)

    @classmethod
    def _public_url(cls, file_name: str) -> str:
        return f"{cls.get_public_base_url()}/{file_name}"

    # ---- Direct uploads ---- #

    @staticmethod
    def generate_stored_name(field_name: str, original_name: str) -> str:
        """``{field}-{epoch_ms}-{rand}.{ext}``"""
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        ext = original_name.rsplit(".", 1)[-1]
        return f"{field_name}-{unique_suffix}.{ext}"

    @classmethod
    def _write_stream(cls, stream: BinaryIO, target: Path) -> int:
        with open(target, "wb") as out:
            shutil.copyfileobj(stream, out, COPY_BUFFER_SIZE)
        return target.stat().st_size

    @classmethod
    def handle_file_upload(cls, files: Union[IncomingFile, Sequence[IncomingFile]]) -> Dict[str, Any]:
        files = [files] if isinstance(files, IncomingFile) else list(files or [])
        validate_files(files)

        upload_dir = cls.get_upload_dir()
        paths: List[str] = []
        names: List[str] = []
        sizes: List[str] = []

        for f in files:
            logger.info(
                f"Dosya yükleniyor: {f.original_name}",
                extra={"original_name": f.original_name, "size": f.size, "mime_type": f.mime_type}
            )
            stored_name = cls.generate_stored_name(f.field_name, f.original_name)
            written = cls._write_stream(f.stream, upload_dir / stored_name)

            paths.append(cls._public_url(stored_name))
            names.append(f.original_name)
            sizes.append(str(written))

        return {
            "message": "File uploaded successfully",
            "file_paths": ",".join(paths),
            "sizes": ",".join(sizes),
            "filenames": ",".join(names),
        }

    @classmethod
    def save_file(cls, data: bytes, original_name: str) -> str:
        """Dosyayı ``uuid4 + uzantı`` adıyla kaydeder ve public URL döner."""
        file_name = f"{uuid.uuid4()}{os.path.splitext(original_name)[1]}"
        file_path = cls.get_upload_dir() / file_name
        file_path.write_bytes(data)
        logger.info(f"Dosya kaydedildi: {file_path}")
        return cls._public_url(file_name)

    @classmethod
    def delete_file_by_url(cls, file_urls: Union[str, Sequence[str]]) -> List[str]:
        """
        Public URL'leri yerel dosyalara çevirip siler, silinen yolları döner.

        PUBLIC_BASE_URL ile başlamayan, boş, ``..`` içeren veya mutlak yol
        üreten URL'ler atlanır. Diskte olmayan dosya sadece uyarı loglar.
        """
        urls = [file_urls] if isinstance(file_urls, str) else list(file_urls)
        base_url = cls.get_public_base_url()
        upload_dir = cls.get_upload_dir()
        deleted: List[str] = []

        for url in urls:
            url_parts = url.split(base_url)
            if len(url_parts) != 2 or url_parts[0]:
                logger.error(f"Geçersiz dosya URL formatı, silme atlandı: {url}")
                continue

            file_name = url_parts[1][1:] if url_parts[1].startswith("/") else url_parts[1]

            # Path traversal kontrolü
            if not file_name or ".." in file_name or os.path.isabs(file_name):
                logger.warning(f"Şüpheli veya boş dosya adı, silme atlandı: {url}")
                continue

            file_path = upload_dir / file_name
            try:
                file_path.unlink()
            except FileNotFoundError:
                logger.warning(f"Dosya diskte bulunamadı, silme atlandı: {file_path}")
                continue
            except OSError as e:
                logger.error(f"Dosya silinemedi: {file_path}", extra={"error": str(e)})
                continue

            logger.info(f"Dosya silindi: {file_path}")
            deleted.append(str(file_path))

        return deleted

    # ---- Chunked uploads ---- #

    @classmethod
    def _chunk_dir(cls, upload_id: str) -> Path:
        try:
            normalized = str(uuid.UUID(upload_id))
        except (ValueError, TypeError, AttributeError) as e:
            raise ChunkUploadNotFoundError(upload_id=str(upload_id)) from e

        chunk_dir = cls.get_upload_dir() / CHUNKS_DIR_NAME / normalized
        if not (chunk_dir / META_FILE_NAME).exists():
            raise ChunkUploadNotFoundError(upload_id=upload_id)
        return chunk_dir

    @classmethod
    def _read_meta(cls, chunk_dir: Path) -> Dict[str, Any]:
        with open(chunk_dir / META_FILE_NAME, "r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _received_indexes(chunk_dir: Path) -> List[int]:
        return sorted(int(p.stem) for p in chunk_dir.glob("*.part"))

    @staticmethod
    def _resolve_mime_type(filename: str, mime_type: Optional[str]) -> str:
        # mimeType gönderilmezse dosya uzantısından tahmin edilir
        if mime_type and mime_type != DEFAULT_MIME_TYPE:
            return mime_type
        guessed, _ = mimetypes.guess_type(filename)
        return guessed or DEFAULT_MIME_TYPE

    @classmethod
    def init_chunk_upload(cls, filename: str, total_size: int, total_chunks: int,
                          mime_type: Optional[str] = DEFAULT_MIME_TYPE) -> str:
        """
        Chunked upload oturumu açar ve upload id döner.

        Tip ve toplam boyut burada kontrol edilir; parça sayısı hem ``[Upload] max_chunks``
        ile hem de toplam boyutla sınırlıdır (her parça en az 1 byte).
        """
        if not filename or not total_size or not total_chunks:
            raise ChunkUploadInvalidError(message="Missing required fields: filename, totalSize, totalChunks")
        if total_size < 0 or total_chunks < 0:
            raise ChunkUploadInvalidError(message="totalSize and totalChunks must be positive")

        max_chunks = cls.get_max_chunks()
        if total_chunks > max_chunks or total_chunks > total_size:
            raise ChunkUploadInvalidError(
                message=f"totalChunks must be between 1 and {min(max_chunks, total_size)}",
                error_details={"total_chunks": total_chunks, "total_size": total_size, "max_chunks": max_chunks},
            )

        mime_type = cls._resolve_mime_type(filename, mime_type)
        validate_file(mime_type, total_size)

        upload_id = str(uuid.uuid4())
        chunk_dir = cls.get_upload_dir() / CHUNKS_DIR_NAME / upload_id
        chunk_dir.mkdir(parents=True, exist_ok=False)

        meta = {
            "filename": filename,
            "total_size": int(total_size),
            "total_chunks": int(total_chunks),
            "mime_type": mime_type,
            "created_at": int(time.time()),
        }
        with open(chunk_dir / META_FILE_NAME, "w", encoding="utf-8") as f:
            json.dump(meta, f)

        logger.info(
            "Chunked upload başlatıldı",
            extra={
                "upload_id": upload_id,
                "original_name": filename,
                "total_size": meta["total_size"],
                "total_chunks": meta["total_chunks"],
                "mime_type": mime_type,
            }
        )
        return upload_id

    @classmethod
    def save_chunk(cls, upload_id: str, chunk_index: int, data: bytes) -> Dict[str, Any]:
        chunk_dir = cls._chunk_dir(upload_id)
        meta = cls._read_meta(chunk_dir)

        if chunk_index < 0 or chunk_index >= meta["total_chunks"]:
            raise ChunkUploadInvalidError(
                message=f"chunkIndex out of range: {chunk_index}. Expected 0..{meta['total_chunks'] - 1}",
                error_details={"upload_id": upload_id, "chunk_index": chunk_index},
            )

        max_chunk_size = cls.get_max_chunk_size()
        if len(data) > max_chunk_size:
            raise ChunkUploadInvalidError(
                message=f"Chunk too large: {len(data) / MB:.2f}MB. Max allowed is {max_chunk_size // MB}MB.",
                error_details={"upload_id": upload_id, "chunk_index": chunk_index, "size": len(data)},
            )

        (chunk_dir / f"{chunk_index}.part").write_bytes(data)
        received = len(cls._received_indexes(chunk_dir))

        logger.debug(
            "Chunk kaydedildi",
            extra={"upload_id": upload_id, "chunk_index": chunk_index, "received": received}
        )
        return {
            "uploadId": upload_id,
            "chunkIndex": chunk_index,
            "received": received,
            "total": meta["total_chunks"],
        }

    @classmethod
    def complete_chunk_upload(cls, upload_id: str) -> Dict[str, Any]:
        chunk_dir = cls._chunk_dir(upload_id)
        meta = cls._read_meta(chunk_dir)

        received = set(cls._received_indexes(chunk_dir))
        missing = [i for i in range(meta["total_chunks"]) if i not in received]
        if missing:
            raise ChunkUploadIncompleteError(upload_id=upload_id, missing=missing)

        file_name = f"{uuid.uuid4()}{os.path.splitext(meta['filename'])[1]}"
        target = cls.get_upload_dir() / file_name

        try:
            with open(target, "wb") as out:
                for index in range(meta["total_chunks"]):
                    with open(chunk_dir / f"{index}.part", "rb") as part:
                        shutil.copyfileobj(part, out, COPY_BUFFER_SIZE)

            size = target.stat().st_size
            if size != meta["total_size"]:
                raise ChunkUploadInvalidError(
                    message=f"Assembled size {size} does not match declared totalSize {meta['total_size']}",
                    error_details={"upload_id": upload_id, "size": size, "total_size": meta["total_size"]},
                )
            validate_file(meta["mime_type"], size)
        except Exception:
            target.unlink(missing_ok=True)
            raise
        finally:
            shutil.rmtree(chunk_dir, ignore_errors=True)

        logger.info(
            "Chunked upload tamamlandı",
            extra={"upload_id": upload_id, "file_name": file_name, "size": size}
        )
        return {
            "public_url": cls._public_url(file_name),
            "filename": meta["filename"],
            "size": size,
        }
