"""Contacts 기능 API 라우터입니다. 문의하기 폼 제출을 저장하고 관리자 조회/삭제를 제공합니다."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.models.contact import Contact
from app.schemas.contact import ContactCreate, ContactOut

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.get("", response_model=List[ContactOut])
def list_contacts(db: Session = Depends(get_db)):
    return db.query(Contact).order_by(Contact.created_at.desc(), Contact.contact_id.desc()).all()


@router.post("", response_model=ContactOut, status_code=201)
def create_contact(data: ContactCreate, db: Session = Depends(get_db)):
    if not (data.full_name and data.email and data.mobile and data.city):
        raise HTTPException(status_code=400, detail="이름, 이메일, 연락처, 도시는 필수 입력 항목입니다.")
    contact = Contact(
        full_name=data.full_name,
        email=data.email,
        mobile=data.mobile,
        city=data.city,
        message=data.message or "",
    )
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


@router.delete("/{contact_id}")
def delete_contact(contact_id: int, db: Session = Depends(get_db)):
    contact = db.query(Contact).filter(Contact.contact_id == contact_id).first()
    if contact:
        db.delete(contact)
        db.commit()
    return {"message": "삭제되었습니다."}
