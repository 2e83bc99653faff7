"""Test Clients 사진 업로드와 레코드 수명주기를 검증하는 자동화 테스트입니다."""

import os

from PIL import Image

from app.models.client import Client
from tests.conftest import image_upload, url_to_path

CLIENT_FORM = {"name": "Rowhan Smith", "designation": "CEO", "description": "Great partner."}


def test_create_client_processes_photo(client, db, upload_dir):
    resp = client.post("/api/clients", data=CLIENT_FORM, files=image_upload(width=600, height=600))
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["designation"] == "CEO"

    path = url_to_path(upload_dir, data["image"])
    with Image.open(path) as img:
        assert img.size == (450, 350)
    assert os.listdir(upload_dir) == [path.name]


def test_create_client_requires_designation(client, db, upload_dir):
    form = {k: v for k, v in CLIENT_FORM.items() if k != "designation"}
    resp = client.post("/api/clients", data=form, files=image_upload())
    assert resp.status_code == 400
    assert db.query(Client).count() == 0
    assert os.listdir(upload_dir) == []


def test_create_client_without_photo_fails(client, db):
    resp = client.post("/api/clients", data=CLIENT_FORM)
    assert resp.status_code == 400
    assert resp.json()["code"] == "MISSING_FILE"
    assert db.query(Client).count() == 0


def test_replace_and_delete_client_photo(client, upload_dir):
    created = client.post("/api/clients", data=CLIENT_FORM, files=image_upload()).json()
    first = url_to_path(upload_dir, created["image"])

    updated = client.put(
        f"/api/clients/{created['client_id']}",
        data={"designation": "Founder"},
        files=image_upload(name="second.png", width=300, height=900),
    ).json()
    second = url_to_path(upload_dir, updated["image"])
    assert updated["designation"] == "Founder"
    assert not first.exists()
    assert second.exists()

    resp = client.delete(f"/api/clients/{created['client_id']}")
    assert resp.status_code == 200
    assert not second.exists()
    assert client.get("/api/clients").json() == []


def test_get_missing_client_returns_404(client):
    resp = client.get("/api/clients/42")
    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"
