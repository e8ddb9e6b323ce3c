from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Protocol

from streamauth.services._shared.dto import AuthOrigin, DecodedToken, IssuedToken
from streamauth.services._shared.errors import InvalidSignature, MalformedToken


class TokenCodec(Protocol):
    """Port for issuing and parsing signed bearer tokens."""

    def issue(self, subject: str, ttl: timedelta, *, origin: AuthOrigin) -> IssuedToken: ...

    def parse(self, token: str) -> DecodedToken: ...

    def is_expired(self, decoded: DecodedToken, now: datetime) -> bool: ...


def utcnow() -> datetime:
    """Timezone-aware "now" truncated to milliseconds."""
    now = datetime.now(UTC)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


class StubTokenCodec(TokenCodec):
    """Deterministic in-process codec used in unit tests.

    Tokens look like ``stub.<seq>``; anything else is malformed, and a
    ``stub.`` string this instance never issued fails as a bad signature.
    """

    PREFIX = "stub."

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self.clock = clock
        self._seq = itertools.count(1)
        self._issued: dict[str, DecodedToken] = {}

    def issue(self, subject: str, ttl: timedelta, *, origin: AuthOrigin) -> IssuedToken:
        seq = next(self._seq)
        now = self.clock()
        token = f"{self.PREFIX}{seq}"
        decoded = DecodedToken(
            subject=str(subject),
            origin=origin,
            jti=f"jti-{seq}",
            issued_at=now,
            expires_at=now + ttl,
        )
        self._issued[token] = decoded
        return IssuedToken(
            token=token,
            subject=decoded.subject,
            origin=origin,
            jti=decoded.jti,
            issued_at=decoded.issued_at,
            expires_at=decoded.expires_at,
            expires_in=int(ttl.total_seconds()),
        )

    def parse(self, token: str) -> DecodedToken:
        if not isinstance(token, str) or not token.startswith(self.PREFIX):
            raise MalformedToken()
        try:
            return self._issued[token]
        except KeyError:
            raise InvalidSignature() from None

    def is_expired(self, decoded: DecodedToken, now: datetime) -> bool:
        return now >= decoded.expires_at
