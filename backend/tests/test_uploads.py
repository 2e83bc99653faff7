"""Test Uploads 수신 경계(파일 누락, 확장자, 크기 제한, 고유 파일명)를 검증하는 자동화 테스트입니다."""

import os

from app.config import settings
from tests.conftest import image_upload


def test_upload_size_limit(client, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 10)
    resp = client.post(
        "/api/projects",
        data={"name": "Big", "description": "Too large"},
        files=image_upload(),
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "UNSUPPORTED_UPLOAD"
    assert os.listdir(upload_dir) == []


def test_empty_filename_counts_as_missing(client):
    resp = client.post(
        "/api/projects",
        data={"name": "Apollo", "description": "d"},
        files={"image": ("", b"", "application/octet-stream")},
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "MISSING_FILE"


def test_same_original_name_gets_distinct_files(client, upload_dir):
    first = client.post("/api/projects", data={"name": "A", "description": "a"}, files=image_upload(name="same.png"))
    second = client.post("/api/projects", data={"name": "B", "description": "b"}, files=image_upload(name="same.png"))
    assert first.status_code == second.status_code == 201
    assert first.json()["image"] != second.json()["image"]
    assert len(os.listdir(upload_dir)) == 2


def test_uppercase_extension_is_accepted(client):
    resp = client.post(
        "/api/projects",
        data={"name": "Upper", "description": "case"},
        files=image_upload(name="PHOTO.PNG"),
    )
    assert resp.status_code == 201
