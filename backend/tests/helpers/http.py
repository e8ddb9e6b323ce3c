"""HTTP helper utilities for tests."""

from __future__ import annotations

from typing import Any

API = "/api/v1"
STRONG_PASSWORD = "abc123!@"


def bearer(token: str) -> dict[str, str]:
    """Return an ``Authorization`` header for ``token``."""
    return {"Authorization": f"Bearer {token}"}


def signup(client: Any, email: str = "ana@example.com", password: str = STRONG_PASSWORD, **extra: Any):
    """POST a signup payload and return the response."""
    return client.post(f"{API}/user/signup", json={"email": email, "password": password, **extra})


def login(client: Any, email: str = "ana@example.com", password: str = STRONG_PASSWORD):
    """POST a login payload and return the response."""
    return client.post(f"{API}/user/login", json={"email": email, "password": password})


def login_token(client: Any, email: str = "ana@example.com", password: str = STRONG_PASSWORD) -> str:
    """Log in and return the issued bearer token."""
    resp = login(client, email, password)
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()["data"]["access_token"]


def assert_problem(resp: Any, status: int, code: str) -> dict[str, Any]:
    """Check an RFC 7807 error response and return its body."""
    assert resp.status_code == status, resp.get_json()
    assert resp.mimetype == "application/problem+json"
    body = resp.get_json()
    assert body["status"] == status
    assert body["code"] == code
    assert body["request_id"]
    return body
