"""Newsletters 기능 API 라우터입니다. 뉴스레터 구독 등록과 관리자 조회/삭제를 제공합니다."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.exceptions import DuplicateSubscriptionError
from app.models.newsletter import Newsletter
from app.schemas.newsletter import NewsletterCreate, NewsletterOut

router = APIRouter(prefix="/api/newsletters", tags=["newsletters"])


@router.get("", response_model=List[NewsletterOut])
def list_subscriptions(db: Session = Depends(get_db)):
    return db.query(Newsletter).order_by(Newsletter.created_at.desc(), Newsletter.subscription_id.desc()).all()


@router.post("", response_model=NewsletterOut, status_code=201)
def subscribe(data: NewsletterCreate, db: Session = Depends(get_db)):
    if not data.email:
        raise HTTPException(status_code=400, detail="이메일은 필수 입력 항목입니다.")
    if db.query(Newsletter).filter(Newsletter.email == data.email).first():
        raise DuplicateSubscriptionError(data.email)

    row = Newsletter(email=data.email)
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        # 동시 요청으로 unique 제약에 걸린 경우
        db.rollback()
        raise DuplicateSubscriptionError(data.email)
    db.refresh(row)
    return row


@router.delete("/{subscription_id}")
def delete_subscription(subscription_id: int, db: Session = Depends(get_db)):
    row = db.query(Newsletter).filter(Newsletter.subscription_id == subscription_id).first()
    if row:
        db.delete(row)
        db.commit()
    return {"message": "삭제되었습니다."}
