"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.project import Project
from app.models.client import Client
from app.models.contact import Contact
from app.models.newsletter import Newsletter

__all__ = [
    "Project",
    "Client",
    "Contact",
    "Newsletter",
]
