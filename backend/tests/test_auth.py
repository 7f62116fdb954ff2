import pytest
from fastapi.testclient import TestClient

from app.auth import DEFAULT_DEV_USER_ID, RequestIdentity, identify_user, require_user, resolve_identity_from_headers
from app.errors import UnauthorizedError


class TestResolveIdentityFromHeaders:
    def test_prefers_auth_request_headers(self):
        assert resolve_identity_from_headers(
            x_auth_request_user="alice",
            x_auth_request_email="alice@example.com",
            x_forwarded_user="mallory",
            x_forwarded_email="mallory@example.com",
        ) == ("alice", "alice@example.com")

    def test_falls_back_to_forwarded_headers(self):
        assert resolve_identity_from_headers(x_forwarded_user="bob") == ("bob", None)

    def test_blank_values_are_absent(self):
        assert resolve_identity_from_headers(x_auth_request_user="   ", x_auth_request_email="") == (None, None)


def test_identify_user_fails_closed(monkeypatch):
    monkeypatch.delenv("DEV_MODE", raising=False)

    with pytest.raises(UnauthorizedError) as exc_info:
        identify_user(None)
    assert exc_info.value.status_code == 401


def test_identify_user_dev_mode(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.delenv("DEV_USER_ID", raising=False)

    assert identify_user(None).id == DEFAULT_DEV_USER_ID


def test_header_identity_wins_over_dev_mode(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")

    assert identify_user("alice").id == "alice"


def test_forwarded_user_header_authenticates_requests(client: TestClient):
    response = client.post(
        "/api/caption-sessions",
        json={"name": "Via proxy"},
        headers={"X-Forwarded-User": "dana"},
    )

    assert response.status_code == 201
    assert response.json()["data"]["session"]["user_id"] == "dana"


def test_dev_mode_request_without_headers(client: TestClient, monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.setenv("DEV_USER_ID", "local-dev")

    response = client.get("/api/caption-sessions")

    assert response.status_code == 200
    assert response.json()["data"]["total"] == 0


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/caption-sessions"),
        ("patch", "/api/caption-sessions/s1"),
        ("get", "/api/caption-sessions/s1/captions"),
        ("post", "/api/caption-sessions/s1/captions"),
        ("patch", "/api/caption-sessions/s1/captions/c1"),
        ("delete", "/api/caption-sessions/s1/captions/c1"),
        ("post", "/api/caption-templates"),
    ],
)
def test_every_route_requires_identity(client: TestClient, monkeypatch, method, path):
    monkeypatch.delenv("DEV_MODE", raising=False)
    kwargs = {"json": {"name": "x", "caption_text": "x", "body": "x"}} if method in ("post", "patch") else {}

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


def test_require_user_fails_closed_without_identity(monkeypatch):
    monkeypatch.delenv("DEV_MODE", raising=False)

    assert require_user(RequestIdentity(user_id="alice", email="alice@example.com")).email == "alice@example.com"
    with pytest.raises(UnauthorizedError):
        require_user(RequestIdentity())
