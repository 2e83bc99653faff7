"""이미지 소유 엔티티(Project, Client)의 이미지 파일 수명주기를 관리하는 서비스입니다."""

import asyncio
import logging
import os
from collections import defaultdict
from contextlib import asynccontextmanager, contextmanager
from typing import Hashable, Optional

from fastapi.concurrency import run_in_threadpool

from app.config import settings
from app.services.image_processor import ImageTransformer
from app.utils.helpers import UploadedFile

logger = logging.getLogger(__name__)

PROCESSED_EXTENSION = ".jpg"


def discard_upload(upload: Optional[UploadedFile]):
    if upload is None:
        return
    try:
        os.remove(upload.path)
        logger.info("Removed temporary upload %s", upload.filename)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Failed to remove temporary upload %s: %s", upload.path, e)


@contextmanager
def upload_scope(upload: Optional[UploadedFile]):
    """Guarantee the temporary upload is gone when the block exits."""
    try:
        yield upload
    finally:
        discard_upload(upload)


class KeyedLock:
    """asyncio locks keyed by entity, dropped once nobody holds or waits on them."""

    def __init__(self):
        self._locks: dict = {}
        self._users: dict = defaultdict(int)

    @asynccontextmanager
    async def hold(self, key: Hashable):
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._users[key] += 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] <= 0:
                self._users.pop(key, None)
                self._locks.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._locks


entity_locks = KeyedLock()


class ImageLifecycle:
    """Maps uploads to managed images and managed image URLs back to files."""

    def __init__(
        self,
        upload_dir: str,
        url_prefix: str,
        processed_prefix: str,
        transformer: ImageTransformer,
    ):
        if not processed_prefix:
            raise ValueError("processed_prefix must not be empty")
        self.upload_dir = upload_dir
        self.url_prefix = "/" + url_prefix.strip("/")
        self.processed_prefix = processed_prefix
        self.transformer = transformer

    @classmethod
    def from_settings(cls) -> "ImageLifecycle":
        return cls(
            upload_dir=settings.UPLOAD_DIR,
            url_prefix=settings.UPLOAD_URL_PREFIX,
            processed_prefix=settings.PROCESSED_PREFIX,
            transformer=ImageTransformer.from_settings(),
        )

    def processed_filename(self, upload: UploadedFile) -> str:
        stem = os.path.splitext(upload.filename)[0]
        return f"{self.processed_prefix}{stem}{PROCESSED_EXTENSION}"

    def is_processed(self, filename: str) -> bool:
        return filename.startswith(self.processed_prefix)

    def public_url(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    def resolve_path(self, url: Optional[str]) -> Optional[str]:
        """Return the file path behind a public URL, or None if it is not managed here."""
        if not url or not url.startswith(self.url_prefix + "/"):
            return None
        relative = url[len(self.url_prefix) + 1:]
        root = os.path.abspath(self.upload_dir)
        path = os.path.abspath(os.path.join(root, relative))
        if path == root or os.path.commonpath([root, path]) != root:
            return None
        return path

    async def ingest(self, upload: UploadedFile) -> str:
        """Transform an upload into a managed image and return its public URL.

        The temporary upload never outlives this call.
        """
        filename = self.processed_filename(upload)
        destination = os.path.join(self.upload_dir, filename)
        with upload_scope(upload):
            await run_in_threadpool(self.transformer.crop_and_resize, upload.path, destination)
        return self.public_url(filename)

    def discard(self, url: Optional[str]) -> bool:
        """Best-effort removal of a managed image. Failures are logged, never raised."""
        path = self.resolve_path(url)
        if path is None:
            if url:
                logger.warning("Refusing to delete unmanaged image reference %s", url)
            return False
        if not os.path.exists(path):
            logger.info("Managed image already missing: %s", url)
            return False
        try:
            os.remove(path)
        except OSError as e:
            logger.warning("Failed to delete managed image %s: %s", url, e)
            return False
        logger.info("Deleted managed image %s", url)
        return True


def get_image_lifecycle() -> ImageLifecycle:
    return ImageLifecycle.from_settings()
