"""문의하기(Contact) 폼 제출 기록 모델입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from app.database import Base


class Contact(Base):
    __tablename__ = "contacts"

    contact_id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    mobile = Column(String(30), nullable=False)
    city = Column(String(100), nullable=False)
    message = Column(Text, default="")
    created_at = Column(DateTime, server_default=func.now())
