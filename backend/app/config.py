"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./marketing_site.db"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # File upload
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp", "bmp"]
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    # 변환 완료 파일과 원본 임시 업로드를 구분하는 파일명 접두사
    PROCESSED_PREFIX: str = "processed-"

    # Managed image geometry
    IMAGE_TARGET_WIDTH: int = 450
    IMAGE_TARGET_HEIGHT: int = 350
    IMAGE_JPEG_QUALITY: int = 90

    # 이 시간(초)보다 오래된 미처리 업로드는 정리 대상
    STALE_UPLOAD_SECONDS: int = 60 * 60

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
