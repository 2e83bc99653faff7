"""Clients 기능 API 라우터입니다. 고객 후기와 사진 업로드 요청을 서비스 레이어로 위임합니다."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
from app.database import get_db
from app.schemas.client import ClientOut
from app.services import client_service
from app.services.image_lifecycle_service import ImageLifecycle, get_image_lifecycle
from app.utils.helpers import receive_upload

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("", response_model=List[ClientOut])
def list_clients(db: Session = Depends(get_db)):
    return client_service.get_clients(db)


@router.get("/{client_id}", response_model=ClientOut)
def get_client(client_id: int, db: Session = Depends(get_db)):
    return client_service.get_client(db, client_id)


@router.post("", response_model=ClientOut, status_code=201)
async def create_client(
    name: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    lifecycle: ImageLifecycle = Depends(get_image_lifecycle),
):
    data = client_service.validate_client(name, designation, description)
    upload = await receive_upload(image, required=True)
    return await client_service.create_client(db, data, upload, lifecycle)


@router.put("/{client_id}", response_model=ClientOut)
async def update_client(
    client_id: int,
    name: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    lifecycle: ImageLifecycle = Depends(get_image_lifecycle),
):
    upload = await receive_upload(image, required=False)
    return await client_service.update_client(db, client_id, name, designation, description, upload, lifecycle)


@router.delete("/{client_id}")
async def delete_client(
    client_id: int,
    db: Session = Depends(get_db),
    lifecycle: ImageLifecycle = Depends(get_image_lifecycle),
):
    await client_service.delete_client(db, client_id, lifecycle)
    return {"message": "삭제되었습니다."}
