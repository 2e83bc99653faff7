"""Projects 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
from app.database import get_db
from app.schemas.project import ProjectOut
from app.services import project_service
from app.services.image_lifecycle_service import ImageLifecycle, get_image_lifecycle
from app.utils.helpers import receive_upload

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[ProjectOut])
def list_projects(db: Session = Depends(get_db)):
    return project_service.get_projects(db)


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return project_service.get_project(db, project_id)


@router.post("", response_model=ProjectOut, status_code=201)
async def create_project(
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    lifecycle: ImageLifecycle = Depends(get_image_lifecycle),
):
    data = project_service.validate_project(name, description)
    upload = await receive_upload(image, required=True)
    return await project_service.create_project(db, data, upload, lifecycle)


@router.put("/{project_id}", response_model=ProjectOut)
async def update_project(
    project_id: int,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    lifecycle: ImageLifecycle = Depends(get_image_lifecycle),
):
    upload = await receive_upload(image, required=False)
    return await project_service.update_project(db, project_id, name, description, upload, lifecycle)


@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    lifecycle: ImageLifecycle = Depends(get_image_lifecycle),
):
    await project_service.delete_project(db, project_id, lifecycle)
    return {"message": "삭제되었습니다."}
