import logging
import os
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile

from app.config import settings
from app.exceptions import MissingFileError, UnsupportedUploadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """A raw upload sitting at a temporary path inside the managed directory.

    Owned by the request that received it: it must be promoted by the image
    transform or removed before the request completes.
    """

    path: str
    filename: str
    original_filename: str
    content_type: Optional[str]
    size: int


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def validate_file(file: UploadFile) -> str:
    ext = _extension(file.filename)
    allowed = [item.lower() for item in settings.ALLOWED_IMAGE_EXTENSIONS]
    if ext not in allowed:
        raise UnsupportedUploadError(
            f"File type '{ext}' not allowed. Allowed: {', '.join(allowed)}",
        )
    return ext


async def receive_upload(file: Optional[UploadFile], required: bool = True) -> Optional[UploadedFile]:
    """Store a single multipart file under UPLOAD_DIR with a unique name.

    Returns None when no file was sent and ``required`` is False.
    """
    if file is None or not file.filename:
        if required:
            raise MissingFileError()
        return None

    ext = validate_file(file)
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise UnsupportedUploadError(f"File exceeds {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB limit")

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    filename = f"{uuid.uuid4().hex}.{ext}"
    path = os.path.join(settings.UPLOAD_DIR, filename)

    with open(path, "wb") as f:
        f.write(content)

    logger.info("received upload %s -> %s (%d bytes)", file.filename, filename, len(content))
    return UploadedFile(
        path=path,
        filename=filename,
        original_filename=file.filename,
        content_type=file.content_type,
        size=len(content),
    )
