"""Upload 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel


class ManagedImageCleanupOut(BaseModel):
    dry_run: bool
    referenced_count: int
    processed_count: int
    orphan_count: int
    stale_upload_count: int
    deleted_count: int
    orphan_urls: list[str]
    stale_uploads: list[str]
