"""Unit tests for the flask-jwt-extended token codec."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt as pyjwt
import pytest

from streamauth.infra.jwt import JWTTokenCodec
from streamauth.services._shared.dto import AuthOrigin
from streamauth.services._shared.errors import InvalidSignature, MalformedToken
from streamauth.services._shared.ports import utcnow


@pytest.fixture()
def codec(app) -> JWTTokenCodec:
    return JWTTokenCodec()


def test_issue_then_parse_roundtrips_claims(codec):
    issued = codec.issue("42", timedelta(hours=1), origin=AuthOrigin.LOCAL)
    decoded = codec.parse(issued.token)

    assert decoded.subject == "42"
    assert decoded.origin is AuthOrigin.LOCAL
    assert decoded.jti == issued.jti
    assert decoded.expires_at == issued.expires_at
    assert issued.expires_in == 3600
    assert not codec.is_expired(decoded, utcnow())


def test_issued_at_has_millisecond_precision(codec):
    issued = codec.issue("42", timedelta(hours=1), origin=AuthOrigin.LOCAL)
    assert issued.issued_at.microsecond % 1000 == 0
    assert issued.issued_at.tzinfo is not None


def test_tokens_issued_back_to_back_differ(codec):
    first = codec.issue("42", timedelta(hours=1), origin=AuthOrigin.LOCAL)
    second = codec.issue("42", timedelta(hours=1), origin=AuthOrigin.LOCAL)

    assert first.token != second.token
    assert first.jti != second.jti


def test_origin_claim_survives_encoding(codec):
    issued = codec.issue("g-1", timedelta(hours=1), origin=AuthOrigin.DELEGATED)
    assert codec.parse(issued.token).origin is AuthOrigin.DELEGATED


def test_expired_token_still_parses(codec):
    issued = codec.issue("42", timedelta(seconds=-5), origin=AuthOrigin.LOCAL)
    decoded = codec.parse(issued.token)

    assert codec.is_expired(decoded, utcnow())


def test_expiry_boundary_counts_as_expired(codec):
    issued = codec.issue("42", timedelta(hours=1), origin=AuthOrigin.LOCAL)
    decoded = codec.parse(issued.token)

    assert codec.is_expired(decoded, decoded.expires_at)
    assert not codec.is_expired(decoded, decoded.expires_at - timedelta(milliseconds=1))


def test_token_signed_with_another_key_is_invalid_signature(codec):
    now = datetime.now(UTC)
    forged = pyjwt.encode(
        {
            "sub": "42",
            "jti": "forged",
            "type": "access",
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(hours=1),
        },
        "some-other-signing-key-of-decent-length",
        algorithm="HS256",
    )

    with pytest.raises(InvalidSignature):
        codec.parse(forged)


@pytest.mark.parametrize("raw", ["", "   ", "garbage", "a.b.c", "Bearer x"])
def test_unreadable_tokens_are_malformed(codec, raw):
    with pytest.raises(MalformedToken):
        codec.parse(raw)


def test_signing_key_change_invalidates_outstanding_tokens(app, codec):
    issued = codec.issue("42", timedelta(hours=1), origin=AuthOrigin.LOCAL)

    app.config["JWT_SECRET_KEY"] = "rotated-signing-key-with-enough-entropy"

    with pytest.raises(InvalidSignature):
        codec.parse(issued.token)
