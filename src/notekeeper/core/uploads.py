"""Profile image uploads."""

import asyncio
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import UploadFile, status

from ..config import Settings
from .exceptions import StorageError, UploadError
from .logging import get_logger

logger = get_logger("uploads")


@dataclass(frozen=True)
class StoredUpload:
    original_filename: str
    stored_path: str


def has_upload(upload: Optional[UploadFile]) -> bool:
    """Browsers send an empty file part when no file was picked."""
    return upload is not None and bool(upload.filename)


def build_upload_name(username: str, original_filename: str, millis: Optional[int] = None) -> str:
    """``<username>_<millis><ext>``"""
    millis = millis if millis is not None else int(time.time() * 1000)
    safe_username = Path(username or "unknown").name.replace(" ", "_")
    return f"{safe_username}_{millis}{Path(original_filename).suffix.lower()}"


async def store_profile_image(
    upload: UploadFile, username: str, settings: Settings
) -> StoredUpload:
    """Write an uploaded image under the upload directory."""
    original = upload.filename or ""
    extension = Path(original).suffix.lower()
    if extension not in [ext.lower() for ext in settings.allowed_file_extensions]:
        raise UploadError(
            f"File type '{extension or 'none'}' is not allowed",
            details={"allowed": settings.allowed_file_extensions},
        )

    content = await upload.read()
    if len(content) > settings.max_file_size_bytes:
        raise UploadError(
            f"File too large. Maximum size is {settings.max_file_size_mb}MB.",
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )

    name = build_upload_name(username, original)
    target = Path(settings.upload_dir) / name

    def _write() -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    try:
        await asyncio.to_thread(_write)
    except OSError as e:
        logger.error(f"Error writing upload {target}: {e}")
        raise StorageError("Could not store uploaded file") from e
    logger.info(f"Stored upload {original!r} as {target}")

    prefix = settings.upload_url_prefix.rstrip("/")
    return StoredUpload(original_filename=original, stored_path=f"{prefix}/{name}")
