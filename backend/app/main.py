"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 업로드 이미지 정적 서빙을 등록합니다."""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.database import Base, engine
from app.exceptions import register_exception_handlers
from app.logging_config import setup_logging
import app.models  # noqa: F401 - 모델 import로 metadata 등록
from app.routers import projects, clients, contacts, newsletters, uploads

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Marketing Site Content API",
    description="프로젝트/클라이언트 콘텐츠와 문의, 뉴스레터 구독을 관리하는 백엔드",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register all routers
app.include_router(projects.router)
app.include_router(clients.router)
app.include_router(contacts.router)
app.include_router(newsletters.router)
app.include_router(uploads.router)


@app.on_event("startup")
def ensure_schema():
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready, serving uploads from %s", os.path.abspath(settings.UPLOAD_DIR))


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Marketing Site Content API"}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
