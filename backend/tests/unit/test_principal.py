"""Unit tests for principal variants."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from streamauth.services._shared.dto import AuthOrigin, DecodedToken
from streamauth.services.auth import (
    DelegatedPrincipal,
    LocalPrincipal,
    Principal,
    principal_from_token,
)


def _decoded(origin: AuthOrigin) -> DecodedToken:
    now = datetime(2024, 1, 1, tzinfo=UTC)
    return DecodedToken(
        subject="7", origin=origin, jti="j", issued_at=now, expires_at=now + timedelta(hours=1)
    )


def test_both_variants_satisfy_the_capability():
    assert isinstance(LocalPrincipal("1"), Principal)
    assert isinstance(DelegatedPrincipal("1", provider="google"), Principal)


def test_variants_report_their_origin():
    assert LocalPrincipal("1").origin() is AuthOrigin.LOCAL
    assert DelegatedPrincipal("1").origin() is AuthOrigin.DELEGATED


def test_principal_from_token_restores_variant():
    assert principal_from_token(_decoded(AuthOrigin.LOCAL)) == LocalPrincipal("7")
    assert principal_from_token(_decoded(AuthOrigin.DELEGATED)) == DelegatedPrincipal("7")
