"""Project Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 이미지 수명주기 흐름을 캡슐화합니다."""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.project import Project
from app.services import image_owner_service
from app.services.image_lifecycle_service import ImageLifecycle
from app.utils.helpers import UploadedFile

LABEL = "프로젝트"
REQUIRED_FIELDS = ("name", "description")


def validate_project(name: Optional[str], description: Optional[str]) -> dict:
    return image_owner_service.require_fields(
        {"name": name, "description": description},
        REQUIRED_FIELDS,
    )


def get_projects(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.created_at.desc(), Project.project_id.desc()).all()


def get_project(db: Session, project_id: int) -> Project:
    return image_owner_service.get_owner(db, Project, project_id, LABEL)


async def create_project(db: Session, data: dict, upload: Optional[UploadedFile], lifecycle: ImageLifecycle) -> Project:
    return await image_owner_service.create_owner(db, Project, data, upload, lifecycle)


async def update_project(
    db: Session,
    project_id: int,
    name: Optional[str],
    description: Optional[str],
    upload: Optional[UploadedFile],
    lifecycle: ImageLifecycle,
) -> Project:
    return await image_owner_service.update_owner(
        db,
        Project,
        project_id,
        {"name": name, "description": description},
        upload,
        lifecycle,
        LABEL,
    )


async def delete_project(db: Session, project_id: int, lifecycle: ImageLifecycle):
    await image_owner_service.delete_owner(db, Project, project_id, lifecycle, LABEL)
