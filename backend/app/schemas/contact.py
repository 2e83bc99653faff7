"""Contact 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class ContactCreate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    city: Optional[str] = None
    message: Optional[str] = None

    @field_validator("full_name", "email", "mobile", "city", "message")
    @classmethod
    def strip_text(cls, value: Optional[str]):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: Optional[str]):
        return value.lower() if value else value


class ContactOut(BaseModel):
    contact_id: int
    full_name: str
    email: str
    mobile: str
    city: str
    message: str
    created_at: datetime

    model_config = {"from_attributes": True}
