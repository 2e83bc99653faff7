"""Managed Image 정리 서비스입니다. 어떤 레코드도 참조하지 않는 이미지와 오래된 임시 업로드를 찾습니다."""

import logging
import os
import time
from typing import Iterable

from sqlalchemy.orm import Session

from app.config import settings
from app.models.client import Client
from app.models.project import Project
from app.services.image_lifecycle_service import ImageLifecycle
from app.services.image_processor import PARTIAL_SUFFIX

logger = logging.getLogger(__name__)


def _collect(urls: Iterable[str | None]) -> set[str]:
    return {url for url in urls if url}


def collect_referenced_image_urls(db: Session) -> set[str]:
    referenced: set[str] = set()
    referenced.update(_collect(row[0] for row in db.query(Project.image).all()))
    referenced.update(_collect(row[0] for row in db.query(Client.image).all()))
    return referenced


def _scan_upload_dir(lifecycle: ImageLifecycle) -> tuple[set[str], list[str]]:
    root = lifecycle.upload_dir
    if not os.path.isdir(root):
        return set(), []

    processed: set[str] = set()
    temporary: list[str] = []
    for entry in os.scandir(root):
        if not entry.is_file():
            continue
        # 변환 중인 *.part 출력은 임시 파일로 취급한다
        if lifecycle.is_processed(entry.name) and not entry.name.endswith(PARTIAL_SUFFIX):
            processed.add(lifecycle.public_url(entry.name))
        else:
            temporary.append(entry.name)
    return processed, temporary


def _is_stale(path: str | None, now: float, max_age_seconds: int) -> bool:
    if path is None:
        return False
    try:
        return now - os.path.getmtime(path) >= max_age_seconds
    except OSError:
        return False


def cleanup_orphan_images(db: Session, dry_run: bool = True, lifecycle: ImageLifecycle | None = None):
    lifecycle = lifecycle or ImageLifecycle.from_settings()
    referenced = collect_referenced_image_urls(db)
    processed, temporary = _scan_upload_dir(lifecycle)

    # 변환 후 커밋 전인 요청의 파일일 수 있으므로 새 파일은 남긴다
    now = time.time()
    max_age = settings.STALE_UPLOAD_SECONDS
    orphan_urls = sorted(
        url
        for url in processed - referenced
        if _is_stale(lifecycle.resolve_path(url), now, max_age)
    )
    stale_uploads = sorted(
        name
        for name in temporary
        if _is_stale(os.path.join(lifecycle.upload_dir, name), now, max_age)
    )

    deleted_count = 0
    if not dry_run:
        for url in orphan_urls:
            if lifecycle.discard(url):
                deleted_count += 1
        for name in stale_uploads:
            try:
                os.remove(os.path.join(lifecycle.upload_dir, name))
                deleted_count += 1
            except OSError as e:
                logger.warning("Failed to delete stale upload %s: %s", name, e)

    logger.info(
        "Managed image cleanup (dry_run=%s): %d orphan, %d stale, %d deleted",
        dry_run,
        len(orphan_urls),
        len(stale_uploads),
        deleted_count,
    )
    return {
        "dry_run": dry_run,
        "referenced_count": len(referenced),
        "processed_count": len(processed),
        "orphan_count": len(orphan_urls),
        "stale_upload_count": len(stale_uploads),
        "deleted_count": deleted_count,
        "orphan_urls": orphan_urls,
        "stale_uploads": stale_uploads,
    }
