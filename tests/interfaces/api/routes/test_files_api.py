"""End-to-end tests for the file, edit and notification endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from docledger.application.use_cases.users import create_user
from docledger.infrastructure.database import get_db
from docledger.infrastructure.repositories import (
    EditRepository,
    NotificationRepository,
)
from main import create_app


@pytest.fixture()
def client(session_factory):
    """Return a test client whose requests use the isolated test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def people(make_user, auth_headers):
    users = {
        "editor": make_user("editor"),
        "other_editor": make_user("editor"),
        "admin": make_user("admin"),
        "viewer": make_user("viewer"),
    }
    return {key: (user, auth_headers(user)) for key, user in users.items()}


def _create(client: TestClient, headers, name="a.txt", content="hello") -> dict:
    response = client.post("/files/", json={"name": name, "content": content}, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_requests_without_token_are_rejected(client: TestClient) -> None:
    assert client.get("/files/").status_code == 401


def test_create_and_save_flow(client: TestClient, people) -> None:
    editor, headers = people["editor"]

    created = _create(client, headers)
    assert created["status"] == "approved"
    assert created["author"]["id"] == editor.id
    assert [v["content"] for v in created["versions"]] == ["hello"]

    saved = client.put(
        f"/files/{created['id']}/save",
        json={"content": "world", "name": "b.txt"},
        headers=headers,
    )
    assert saved.status_code == 200
    body = saved.json()
    assert body["content"] == "world"
    assert body["name"] == "b.txt"
    assert [v["content"] for v in body["versions"]] == ["hello", "hello"]

    history = client.get(f"/files/{created['id']}/versions", headers=headers)
    assert history.status_code == 200
    assert [v["position"] for v in history.json()] == [0, 1]


def test_role_gate_blocks_viewers_and_editors(client: TestClient, people) -> None:
    _, editor_headers = people["editor"]
    _, viewer_headers = people["viewer"]
    file_id = _create(client, editor_headers)["id"]

    create_attempt = client.post(
        "/files/", json={"name": "x", "content": "y"}, headers=viewer_headers
    )
    force_attempt = client.put(
        f"/files/{file_id}", json={"content": "z"}, headers=editor_headers
    )
    delete_attempt = client.delete(f"/files/{file_id}", headers=viewer_headers)

    assert create_attempt.status_code == 403
    assert force_attempt.status_code == 403
    assert delete_attempt.status_code == 403


def test_ownership_forbidden_maps_to_403(client: TestClient, people) -> None:
    _, owner_headers = people["editor"]
    _, other_headers = people["other_editor"]
    _, admin_headers = people["admin"]
    file_id = _create(client, owner_headers)["id"]

    denied = client.put(
        f"/files/{file_id}/save", json={"content": "mine now"}, headers=other_headers
    )
    allowed = client.put(
        f"/files/{file_id}/save", json={"content": "moderated"}, headers=admin_headers
    )

    assert denied.status_code == 403
    assert denied.json()["detail"] == "You can only save your own files"
    assert allowed.status_code == 200


def test_admin_force_update(client: TestClient, people) -> None:
    _, owner_headers = people["editor"]
    _, admin_headers = people["admin"]
    file_id = _create(client, owner_headers)["id"]

    response = client.put(f"/files/{file_id}", json={"content": "forced"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["content"] == "forced"
    assert client.put("/files/999", json={"content": "x"}, headers=admin_headers).status_code == 404


def test_missing_file_returns_404(client: TestClient, people) -> None:
    _, headers = people["viewer"]

    response = client.get("/files/12345", headers=headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "File not found"


def test_authors_with_internal_domain_emails_are_readable(
    client: TestClient, make_user, auth_headers
) -> None:
    editor = make_user("editor", email="alice@corp.local")
    headers = auth_headers(editor)
    created = _create(client, headers)

    for path in ("/files/", "/files/my/files", f"/files/{created['id']}"):
        response = client.get(path, headers=headers)
        assert response.status_code == 200, path

    listed = client.get("/files/", headers=headers).json()
    assert listed[0]["author"]["email"] == "alice@corp.local"


def test_my_files_lists_only_own_files(client: TestClient, people) -> None:
    _, editor_headers = people["editor"]
    _, other_headers = people["other_editor"]
    mine = _create(client, editor_headers, name="mine.txt")
    _create(client, other_headers, name="theirs.txt")

    response = client.get("/files/my/files", headers=editor_headers)
    all_files = client.get("/files/", headers=editor_headers)

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [mine["id"]]
    assert len(all_files.json()) == 2


def test_delete_cascades_to_edits_and_notifications(
    client: TestClient, people, session
) -> None:
    owner, owner_headers = people["editor"]
    _, viewer_headers = people["viewer"]
    _, other_headers = people["other_editor"]
    file_id = _create(client, owner_headers)["id"]

    proposed = client.post(
        f"/files/{file_id}/edits/", json={"content": "suggestion"}, headers=viewer_headers
    )
    assert proposed.status_code == 201
    inbox = client.get("/notifications/", headers=owner_headers).json()
    assert [item["file_id"] for item in inbox] == [file_id]
    edits = client.get(f"/files/{file_id}/edits/", headers=owner_headers)
    assert len(edits.json()) == 1
    assert client.get(f"/files/{file_id}/edits/", headers=viewer_headers).status_code == 403

    deleted = client.delete(f"/files/{file_id}", headers=other_headers)

    assert deleted.status_code == 200
    assert deleted.json() == {"message": "File deleted successfully"}
    assert client.get(f"/files/{file_id}", headers=owner_headers).status_code == 404
    assert client.delete(f"/files/{file_id}", headers=other_headers).status_code == 404
    assert EditRepository(session).count_for_file(file_id) == 0
    assert NotificationRepository(session).count_for_file(file_id) == 0
    assert client.get("/notifications/", headers=owner_headers).json() == []


def test_mark_notifications_read(client: TestClient, people) -> None:
    _, owner_headers = people["editor"]
    _, viewer_headers = people["viewer"]
    file_id = _create(client, owner_headers)["id"]
    client.post(f"/files/{file_id}/edits/", json={"content": "s"}, headers=viewer_headers)
    notification_id = client.get("/notifications/", headers=owner_headers).json()[0]["id"]

    response = client.post(
        "/notifications/read", json={"ids": [notification_id]}, headers=owner_headers
    )

    assert response.status_code == 204
    unread = client.get("/notifications/?unread_only=true", headers=owner_headers)
    assert unread.json() == []


def test_login_returns_token_usable_on_file_routes(client: TestClient, session) -> None:
    create_user(
        session,
        name="Writer",
        email="writer@example.com",
        password="StrongPass123",
        role_alias="editor",
    )

    bad = client.post(
        "/auth/token", data={"username": "writer@example.com", "password": "wrong"}
    )
    good = client.post(
        "/auth/token", data={"username": "writer@example.com", "password": "StrongPass123"}
    )

    assert bad.status_code == 401
    assert good.status_code == 200
    payload = good.json()
    assert payload["role"] == "editor"
    headers = {"Authorization": f"Bearer {payload['access_token']}"}
    assert _create(client, headers)["author"]["email"] == "writer@example.com"
