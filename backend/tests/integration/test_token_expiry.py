"""Expiry of real JWTs under a frozen clock."""

from __future__ import annotations

from datetime import timedelta

import pytest
from freezegun import freeze_time

from streamauth.services._shared.errors import TokenExpired
from tests.factories.user import DEFAULT_PASSWORD, UserFactory
from tests.helpers.http import API, assert_problem, bearer


def test_token_expires_after_configured_ttl(db, gateway) -> None:
    UserFactory(email="ana@example.com")

    with freeze_time("2024-01-01 12:00:00") as frozen:
        issued = gateway.login_local("ana@example.com", DEFAULT_PASSWORD)

        frozen.tick(timedelta(seconds=3599))
        assert gateway.verify(issued.token).subject() == issued.subject

        frozen.tick(timedelta(seconds=1))
        with pytest.raises(TokenExpired):
            gateway.verify(issued.token)


def test_expired_token_is_rejected_over_http(client, db, gateway) -> None:
    UserFactory(email="ana@example.com")

    with freeze_time("2024-01-01 12:00:00") as frozen:
        issued = gateway.login_local("ana@example.com", DEFAULT_PASSWORD)
        frozen.tick(timedelta(hours=2))

        resp = client.get(f"{API}/user/user-info", headers=bearer(issued.token))

    assert_problem(resp, 401, "token_expired")
