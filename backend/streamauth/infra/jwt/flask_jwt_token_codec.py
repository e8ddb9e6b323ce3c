# streamauth/infra/jwt/flask_jwt_token_codec.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import InvalidSignatureError, PyJWTError

from streamauth.services._shared.dto import AuthOrigin, DecodedToken, IssuedToken
from streamauth.services._shared.errors import InvalidSignature, MalformedToken
from streamauth.services._shared.ports import TokenCodec, utcnow

ORIGIN_CLAIM = "origin"
ISSUED_AT_MS_CLAIM = "iat_ms"


@dataclass(slots=True)
class JWTTokenCodec(TokenCodec):
    """
    Adapter for Flask-JWT-Extended.

    Signs with ``JWT_SECRET_KEY`` / ``JWT_ALGORITHM`` from the Flask config,
    so every call needs an active app context. Each token carries a fresh
    ``jti`` plus the issue instant in milliseconds, which keeps tokens from
    rapid repeated logins distinct and independently revocable.

    .. note::
       Expired tokens still parse; expiry is a separate, pure check so the
       gateway can tell *expired* from *forged*.
    """

    def issue(self, subject: str, ttl: timedelta, *, origin: AuthOrigin) -> IssuedToken:
        issued_at = utcnow()
        token = cast(
            str,
            create_access_token(
                identity=str(subject),
                expires_delta=ttl,
                additional_claims={
                    ORIGIN_CLAIM: origin.value,
                    ISSUED_AT_MS_CLAIM: int(issued_at.timestamp() * 1000),
                },
            ),
        )
        # Read back what was actually signed so callers see the encoded expiry.
        decoded = self.parse(token)
        return IssuedToken(
            token=token,
            subject=decoded.subject,
            origin=decoded.origin,
            jti=decoded.jti,
            issued_at=decoded.issued_at,
            expires_at=decoded.expires_at,
            expires_in=int(ttl.total_seconds()),
        )

    def parse(self, token: str) -> DecodedToken:
        if not isinstance(token, str) or not token.strip():
            raise MalformedToken()
        try:
            claims = cast(dict[str, Any], decode_token(token, allow_expired=True))
        except InvalidSignatureError:
            raise InvalidSignature() from None
        except (PyJWTError, JWTExtendedException, ValueError):
            raise MalformedToken() from None
        return self._to_decoded(claims)

    def is_expired(self, decoded: DecodedToken, now: datetime) -> bool:
        return now >= decoded.expires_at

    @staticmethod
    def _to_decoded(claims: dict[str, Any]) -> DecodedToken:
        """Validate claim presence and types; anything off is malformed."""
        try:
            subject = claims["sub"]
            jti = claims["jti"]
            exp = int(claims["exp"])
            origin = AuthOrigin(claims.get(ORIGIN_CLAIM, AuthOrigin.LOCAL.value))
            iat_ms = claims.get(ISSUED_AT_MS_CLAIM)
            if iat_ms is not None:
                issued_at = datetime.fromtimestamp(int(iat_ms) / 1000, tz=UTC)
            else:
                issued_at = datetime.fromtimestamp(int(claims["iat"]), tz=UTC)
        except (KeyError, TypeError, ValueError):
            raise MalformedToken() from None
        if not isinstance(subject, str | int) or not isinstance(jti, str) or not jti:
            raise MalformedToken()
        return DecodedToken(
            subject=str(subject),
            origin=origin,
            jti=jti,
            issued_at=issued_at,
            expires_at=datetime.fromtimestamp(exp, tz=UTC),
        )
