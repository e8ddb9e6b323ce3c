"""Integration tests for delegated (OAuth2) login completion."""

from __future__ import annotations

from urllib.parse import unquote

import pytest
from flask import Request

from streamauth.core.security import register_identity_provider
from streamauth.services._shared.errors import IdentityProviderError
from streamauth.services.auth import DelegatedPrincipal
from tests.helpers.http import API, assert_problem, bearer, login_token, signup

REDIRECT_PREFIX = "http://localhost:3000/auth/oauth-response/"


class StubIdentityProvider:
    """Pretend provider: the callback's ``uid`` query arg is the proven identity."""

    name = "stub"

    def complete_login(self, request: Request) -> DelegatedPrincipal:
        uid = request.args.get("uid")
        if not uid:
            raise IdentityProviderError("Provider did not return an identity")
        return DelegatedPrincipal(subject_id=uid, provider=self.name)


@pytest.fixture()
def client(app):
    register_identity_provider(app, StubIdentityProvider())
    return app.test_client()


def _token_from_location(location: str) -> tuple[str, str]:
    assert location.startswith(REDIRECT_PREFIX)
    token, ttl = location[len(REDIRECT_PREFIX):].split("/")
    return unquote(token), ttl


def test_callback_redirects_with_token_and_ttl(client) -> None:
    resp = client.get(f"{API}/oauth2/callback/stub?uid=g-123")

    assert resp.status_code == 302
    token, ttl = _token_from_location(resp.headers["Location"])
    assert ttl == "3600"

    info = client.get(f"{API}/user/user-info", headers=bearer(token))
    assert info.status_code == 200
    data = info.get_json()["data"]
    assert data["subject"] == "g-123"
    assert data["origin"] == "delegated"
    assert data["email"] is None


def test_delegated_and_local_tokens_share_ttl(client, gateway) -> None:
    signup(client)
    local = gateway.codec.parse(login_token(client))
    token, _ = _token_from_location(client.get(f"{API}/oauth2/callback/stub?uid=g-1").headers["Location"])
    delegated = gateway.codec.parse(token)

    assert abs(
        (delegated.expires_at - delegated.issued_at) - (local.expires_at - local.issued_at)
    ).total_seconds() < 1


def test_delegated_token_can_be_logged_out(client) -> None:
    token, _ = _token_from_location(client.get(f"{API}/oauth2/callback/stub?uid=g-1").headers["Location"])

    assert client.post(f"{API}/user/logout", headers=bearer(token)).status_code == 200
    assert_problem(client.get(f"{API}/user/user-info", headers=bearer(token)), 401, "token_revoked")


def test_provider_failure_is_unauthorized(client) -> None:
    assert_problem(client.get(f"{API}/oauth2/callback/stub"), 401, "delegated_login_failed")


def test_unknown_provider_is_not_implemented(client) -> None:
    assert_problem(client.get(f"{API}/oauth2/callback/github"), 501, "not_implemented")
