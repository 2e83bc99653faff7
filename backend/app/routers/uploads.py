"""Uploads 기능 API 라우터입니다. 관리 이미지 디렉터리 정리 작업을 노출합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.upload import ManagedImageCleanupOut
from app.services import managed_image_service
from app.services.image_lifecycle_service import ImageLifecycle, get_image_lifecycle

router = APIRouter(prefix="/api/uploads", tags=["uploads"])


@router.post("/cleanup", response_model=ManagedImageCleanupOut)
def cleanup_managed_images(
    dry_run: bool = True,
    db: Session = Depends(get_db),
    lifecycle: ImageLifecycle = Depends(get_image_lifecycle),
):
    return managed_image_service.cleanup_orphan_images(db, dry_run=dry_run, lifecycle=lifecycle)
