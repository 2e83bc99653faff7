"""Client 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ClientOut(BaseModel):
    client_id: int
    name: str
    designation: str
    description: str
    image: str
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}
