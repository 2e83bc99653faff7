"""도메인 예외와 FastAPI 예외 핸들러를 정의합니다."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class SiteContentError(Exception):
    """Base exception. `status_code` and `code` shape the API error response."""

    status_code = 500
    code = "SITE_CONTENT_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> dict:
        return {"detail": self.detail, "code": self.code}


class MissingFileError(SiteContentError):
    status_code = 400
    code = "MISSING_FILE"

    def __init__(self, detail: str = "이미지 파일이 필요합니다."):
        super().__init__(detail)


class UnsupportedUploadError(SiteContentError):
    status_code = 400
    code = "UNSUPPORTED_UPLOAD"


class ImageDecodeError(SiteContentError):
    """Raised when the source bytes cannot be read as an image."""

    status_code = 422
    code = "IMAGE_DECODE_ERROR"


class ImageWriteError(SiteContentError):
    """Raised when the processed image cannot be written to its destination."""

    status_code = 500
    code = "IMAGE_WRITE_ERROR"


class EntityNotFoundError(SiteContentError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity}을(를) 찾을 수 없습니다.")
        self.entity = entity
        self.entity_id = entity_id


class ValidationFailedError(SiteContentError):
    status_code = 400
    code = "VALIDATION_FAILED"


class DuplicateSubscriptionError(SiteContentError):
    status_code = 400
    code = "ALREADY_SUBSCRIBED"

    def __init__(self, email: str):
        super().__init__("이미 구독 중인 이메일입니다.")
        self.email = email


async def site_content_exception_handler(request: Request, exc: SiteContentError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(SiteContentError, site_content_exception_handler)
