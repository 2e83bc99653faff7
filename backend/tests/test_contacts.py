"""Test Contacts 문의 폼 저장/조회/삭제를 검증하는 자동화 테스트입니다."""

from app.models.contact import Contact


def test_create_contact_normalizes_email(client, db):
    resp = client.post(
        "/api/contacts",
        json={"full_name": " Jane Doe ", "email": " Jane@Example.COM ", "mobile": "5551234", "city": "Austin"},
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["full_name"] == "Jane Doe"
    assert data["email"] == "jane@example.com"
    assert data["message"] == ""
    assert db.query(Contact).count() == 1


def test_create_contact_requires_fields(client, db):
    resp = client.post("/api/contacts", json={"full_name": "Jane", "email": "jane@example.com", "city": "Austin"})
    assert resp.status_code == 400
    assert db.query(Contact).count() == 0


def test_list_and_delete_contacts(client):
    for name in ("First", "Second"):
        client.post(
            "/api/contacts",
            json={"full_name": name, "email": f"{name}@x.io", "mobile": "1", "city": "C", "message": "hi"},
        )
    listed = client.get("/api/contacts").json()
    assert [c["full_name"] for c in listed] == ["Second", "First"]

    resp = client.delete(f"/api/contacts/{listed[0]['contact_id']}")
    assert resp.status_code == 200
    assert len(client.get("/api/contacts").json()) == 1
