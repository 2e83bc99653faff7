"""Client Service 도메인 서비스 레이어입니다. 고객 후기 레코드와 사진 파일을 함께 관리합니다."""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.client import Client
from app.services import image_owner_service
from app.services.image_lifecycle_service import ImageLifecycle
from app.utils.helpers import UploadedFile

LABEL = "클라이언트"
REQUIRED_FIELDS = ("name", "designation", "description")


def validate_client(name: Optional[str], designation: Optional[str], description: Optional[str]) -> dict:
    return image_owner_service.require_fields(
        {"name": name, "designation": designation, "description": description},
        REQUIRED_FIELDS,
    )


def get_clients(db: Session) -> List[Client]:
    return db.query(Client).order_by(Client.created_at.desc(), Client.client_id.desc()).all()


def get_client(db: Session, client_id: int) -> Client:
    return image_owner_service.get_owner(db, Client, client_id, LABEL)


async def create_client(db: Session, data: dict, upload: Optional[UploadedFile], lifecycle: ImageLifecycle) -> Client:
    return await image_owner_service.create_owner(db, Client, data, upload, lifecycle)


async def update_client(
    db: Session,
    client_id: int,
    name: Optional[str],
    designation: Optional[str],
    description: Optional[str],
    upload: Optional[UploadedFile],
    lifecycle: ImageLifecycle,
) -> Client:
    return await image_owner_service.update_owner(
        db,
        Client,
        client_id,
        {"name": name, "designation": designation, "description": description},
        upload,
        lifecycle,
        LABEL,
    )


async def delete_client(db: Session, client_id: int, lifecycle: ImageLifecycle):
    await image_owner_service.delete_owner(db, Client, client_id, lifecycle, LABEL)
