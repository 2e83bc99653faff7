"""Test Managed Image 정리(고아 파일/오래된 임시 업로드) 동작을 검증하는 자동화 테스트입니다."""

import os
import time

from app.config import settings
from app.models.project import Project
from app.services import managed_image_service
from app.services.image_processor import ImageTransformer
from tests.conftest import image_upload, url_to_path


def _write(path, content=b"test", age_seconds=0):
    path.write_bytes(content)
    if age_seconds:
        old = time.time() - age_seconds
        os.utime(path, (old, old))
    return path


def test_cleanup_dry_run_and_apply(client, db, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "STALE_UPLOAD_SECONDS", 60)

    used = _write(upload_dir / "processed-used.jpg", age_seconds=3600)
    orphan = _write(upload_dir / "processed-orphan.jpg", age_seconds=3600)
    stale = _write(upload_dir / "abc123.png", age_seconds=3600)
    fresh = _write(upload_dir / "def456.png")

    db.add(Project(name="Kept", description="d", image="/uploads/processed-used.jpg"))
    db.commit()

    dry = client.post("/api/uploads/cleanup?dry_run=true").json()
    assert dry["dry_run"] is True
    assert dry["referenced_count"] == 1
    assert dry["processed_count"] == 2
    assert dry["orphan_urls"] == ["/uploads/processed-orphan.jpg"]
    assert dry["stale_uploads"] == ["abc123.png"]
    assert dry["deleted_count"] == 0
    assert orphan.exists() and stale.exists()

    applied = client.post("/api/uploads/cleanup?dry_run=false").json()
    assert applied["deleted_count"] == 2
    assert used.exists()
    assert fresh.exists()
    assert not orphan.exists()
    assert not stale.exists()


def test_cleanup_keeps_fresh_unreferenced_processed_image(client, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "STALE_UPLOAD_SECONDS", 60)
    fresh = _write(upload_dir / "processed-just-made.jpg")

    applied = client.post("/api/uploads/cleanup?dry_run=false").json()
    assert applied["orphan_urls"] == []
    assert applied["deleted_count"] == 0
    assert fresh.exists()


def test_cleanup_keeps_in_progress_partial_output(client, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "STALE_UPLOAD_SECONDS", 60)
    partial = _write(upload_dir / "processed-abc.jpg.part")

    applied = client.post("/api/uploads/cleanup?dry_run=false").json()
    assert applied["processed_count"] == 0
    assert applied["orphan_urls"] == []
    assert applied["stale_uploads"] == []
    assert partial.exists()


def test_cleanup_reclaims_abandoned_partial_output(client, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "STALE_UPLOAD_SECONDS", 60)
    partial = _write(upload_dir / "processed-abc.jpg.part", age_seconds=3600)

    applied = client.post("/api/uploads/cleanup?dry_run=false").json()
    assert applied["orphan_urls"] == []
    assert applied["stale_uploads"] == ["processed-abc.jpg.part"]
    assert not partial.exists()


def test_cleanup_between_transform_and_commit_keeps_new_image(client, db, upload_dir, monkeypatch):
    reports = []
    original = ImageTransformer.crop_and_resize

    def transform_then_cleanup(self, source, destination):
        result = original(self, source, destination)
        reports.append(managed_image_service.cleanup_orphan_images(db, dry_run=False))
        return result

    monkeypatch.setattr(ImageTransformer, "crop_and_resize", transform_then_cleanup)

    resp = client.post("/api/projects", data={"name": "Apollo", "description": "d"}, files=image_upload())
    assert resp.status_code == 201
    assert reports[0]["deleted_count"] == 0
    assert url_to_path(upload_dir, resp.json()["image"]).exists()


def test_cleanup_with_missing_upload_dir(client, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(upload_dir / "does-not-exist"))
    resp = client.post("/api/uploads/cleanup")
    assert resp.status_code == 200
    assert resp.json()["orphan_count"] == 0
