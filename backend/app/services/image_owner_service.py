"""이미지를 소유하는 엔티티(Project, Client)의 공통 생성/수정/삭제 흐름입니다."""

import logging
from typing import Dict, Iterable, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import Base
from app.exceptions import EntityNotFoundError, MissingFileError, ValidationFailedError
from app.services.image_lifecycle_service import ImageLifecycle, entity_locks, upload_scope
from app.utils.helpers import UploadedFile

logger = logging.getLogger(__name__)


def require_fields(fields: Dict[str, Optional[str]], labels: Iterable[str]) -> Dict[str, str]:
    cleaned = {k: (v or "").strip() for k, v in fields.items()}
    missing = [k for k in labels if not cleaned.get(k)]
    if missing:
        raise ValidationFailedError(f"필수 항목이 누락되었습니다: {', '.join(missing)}")
    return cleaned


def changed_fields(fields: Dict[str, Optional[str]]) -> Dict[str, str]:
    # Blank form values leave the stored value untouched.
    return {k: v.strip() for k, v in fields.items() if v is not None and v.strip()}


def get_owner(db: Session, model: Type[Base], entity_id: int, label: str):
    owner = db.get(model, entity_id)
    if owner is None:
        raise EntityNotFoundError(label, entity_id)
    return owner


async def create_owner(
    db: Session,
    model: Type[Base],
    fields: Dict[str, str],
    upload: Optional[UploadedFile],
    lifecycle: ImageLifecycle,
):
    if upload is None:
        raise MissingFileError()

    image_url = await lifecycle.ingest(upload)
    owner = model(**fields, image=image_url)
    db.add(owner)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        lifecycle.discard(image_url)
        raise
    db.refresh(owner)
    logger.info("Created %s with image %s", model.__name__, image_url)
    return owner


async def update_owner(
    db: Session,
    model: Type[Base],
    entity_id: int,
    fields: Dict[str, Optional[str]],
    upload: Optional[UploadedFile],
    lifecycle: ImageLifecycle,
    label: str,
):
    async with entity_locks.hold((model.__tablename__, entity_id)):
        with upload_scope(upload):
            owner = get_owner(db, model, entity_id, label)
            for k, v in changed_fields(fields).items():
                setattr(owner, k, v)

            if upload is not None:
                previous_url = owner.image
                new_url = await lifecycle.ingest(upload)
                # 새 파일이 생성된 뒤에만 이전 파일을 삭제한다.
                lifecycle.discard(previous_url)
                owner.image = new_url
                logger.info("Replaced %s %s image %s -> %s", model.__name__, entity_id, previous_url, new_url)

            db.commit()
            db.refresh(owner)
            return owner


async def delete_owner(
    db: Session,
    model: Type[Base],
    entity_id: int,
    lifecycle: ImageLifecycle,
    label: str,
):
    async with entity_locks.hold((model.__tablename__, entity_id)):
        owner = get_owner(db, model, entity_id, label)
        lifecycle.discard(owner.image)
        db.delete(owner)
        db.commit()
        logger.info("Deleted %s %s", model.__name__, entity_id)
