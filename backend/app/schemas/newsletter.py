"""Newsletter 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class NewsletterCreate(BaseModel):
    email: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: Optional[str]):
        return value.strip().lower() if isinstance(value, str) else value


class NewsletterOut(BaseModel):
    subscription_id: int
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}
