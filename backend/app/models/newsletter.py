"""뉴스레터 구독 기록 모델입니다."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.database import Base


class Newsletter(Base):
    __tablename__ = "newsletters"

    subscription_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(200), nullable=False, unique=True)
    created_at = Column(DateTime, server_default=func.now())
