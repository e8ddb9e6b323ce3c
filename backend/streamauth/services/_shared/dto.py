"""Value objects exchanged between the gateway, the token codec and transports."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AuthOrigin(str, Enum):
    """Login path that produced a principal (and therefore a token)."""

    LOCAL = "local"
    DELEGATED = "delegated"


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """
    Freshly signed bearer token plus the metadata transport layers need.

    :param token: Encoded, signed token string.
    :type token: str
    :param subject: Stable user identifier carried in ``sub``.
    :type subject: str
    :param origin: Login path that requested the token.
    :type origin: AuthOrigin
    :param jti: Unique token identifier (revocation key).
    :type jti: str
    :param issued_at: Timezone-aware issue instant (millisecond precision).
    :type issued_at: datetime
    :param expires_at: Timezone-aware expiry instant.
    :type expires_at: datetime
    :param expires_in: Lifetime in whole seconds, as advertised to clients.
    :type expires_in: int
    """

    token: str
    subject: str
    origin: AuthOrigin
    jti: str
    issued_at: datetime
    expires_at: datetime
    expires_in: int


@dataclass(frozen=True, slots=True)
class DecodedToken:
    """
    Verified claims of a token whose signature matched the current key.

    Expiry is *not* enforced at this level; see ``TokenCodec.is_expired``.

    :param subject: Stable user identifier.
    :type subject: str
    :param origin: Login path recorded at issue time.
    :type origin: AuthOrigin
    :param jti: Unique token identifier.
    :type jti: str
    :param issued_at: Issue instant.
    :type issued_at: datetime
    :param expires_at: Expiry instant.
    :type expires_at: datetime
    """

    subject: str
    origin: AuthOrigin
    jti: str
    issued_at: datetime
    expires_at: datetime
