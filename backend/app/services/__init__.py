"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    image_processor,
    image_lifecycle_service,
    image_owner_service,
    project_service,
    client_service,
    managed_image_service,
)
