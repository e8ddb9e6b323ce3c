"""Integration tests for deployments configured with the cookie carrier."""

from __future__ import annotations

import pytest

from streamauth.api.transport import encode_cookie_value
from tests.helpers.http import API, assert_problem, bearer, login, signup


@pytest.fixture()
def client(app_factory):
    return app_factory(AUTH_TOKEN_CARRIER="cookie").test_client()


def test_login_sets_http_only_cookie(client) -> None:
    signup(client)

    resp = login(client)

    assert resp.status_code == 200
    header = resp.headers["Set-Cookie"]
    token = resp.get_json()["data"]["access_token"]
    assert header.startswith(f"Authorization={encode_cookie_value(token)}")
    assert "HttpOnly" in header
    assert "Max-Age=3600" in header
    assert "Path=/" in header


def test_cookie_authenticates_and_logout_clears_it(client) -> None:
    signup(client)
    token = login(client).get_json()["data"]["access_token"]

    assert client.get(f"{API}/user/user-info").status_code == 200

    resp = client.post(f"{API}/user/logout")
    assert resp.status_code == 200
    assert "Max-Age=0" in resp.headers["Set-Cookie"]
    assert client.get_cookie("Authorization") is None

    # Replaying the old cookie value is refused.
    client.set_cookie("Authorization", encode_cookie_value(token))
    assert_problem(client.get(f"{API}/user/user-info"), 401, "token_revoked")


def test_header_is_ignored_in_cookie_mode(client) -> None:
    signup(client)
    token = login(client).get_json()["data"]["access_token"]
    client.delete_cookie("Authorization")

    assert_problem(client.get(f"{API}/user/user-info", headers=bearer(token)), 400, "invalid_token")


def test_undecodable_cookie_is_rejected(client) -> None:
    client.set_cookie("Authorization", "%%%")
    assert_problem(client.get(f"{API}/user/user-info"), 400, "invalid_token")
