"""Carry bearer tokens between the gateway and HTTP clients.

One carrier is configured per deployment (``AUTH_TOKEN_CARRIER``):

``header``
    Clients send ``Authorization: Bearer <token>``; login returns the token
    in the JSON body only.
``cookie``
    Login additionally sets an ``Authorization`` cookie whose value is the
    base64 encoding of ``"Bearer <token>"``; requests are authenticated from
    that cookie.

Delegated logins always finish with a redirect that embeds the token and
its TTL in the URL path. The token is therefore visible to the browser and
any proxy logs on that hop, which is only acceptable because the target is a
trusted front end that consumes it immediately.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote

from flask import Request, Response, current_app, redirect

from streamauth.core.config import ConfigurationError
from streamauth.services._shared.dto import IssuedToken
from streamauth.services._shared.errors import MissingOrMalformedHeader

BEARER_PREFIX = "Bearer "
DEFAULT_REDIRECT_TEMPLATE = "http://localhost:3000/auth/oauth-response/{token}/{ttl}"


class TokenCarrier(str, Enum):
    HEADER = "header"
    COOKIE = "cookie"


def parse_bearer(value: str | None) -> str:
    """Return ``<token>`` from ``"Bearer <token>"`` or raise."""
    if not value or not value.startswith(BEARER_PREFIX):
        raise MissingOrMalformedHeader()
    token = value[len(BEARER_PREFIX):].strip()
    if not token:
        raise MissingOrMalformedHeader()
    return token


def encode_cookie_value(token: str) -> str:
    return base64.b64encode(f"{BEARER_PREFIX}{token}".encode()).decode("ascii")


def decode_cookie_value(value: str) -> str:
    try:
        raw = base64.b64decode(value.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        raise MissingOrMalformedHeader() from None
    return parse_bearer(raw)


@dataclass(frozen=True, slots=True)
class TransportAdapter:
    """
    Deliver issued tokens to clients and extract them from requests.

    :param carrier: Configured carrier strategy.
    :param cookie_name: Name of the auth cookie (cookie carrier only).
    :param cookie_secure: ``Secure`` attribute of the auth cookie.
    :param redirect_template: Delegated-login redirect with ``{token}`` and
        ``{ttl}`` placeholders.
    """

    carrier: TokenCarrier = TokenCarrier.HEADER
    cookie_name: str = "Authorization"
    cookie_secure: bool = False
    redirect_template: str = DEFAULT_REDIRECT_TEMPLATE

    @classmethod
    def from_config(cls, config: Any) -> TransportAdapter:
        """Build the adapter from a Flask config mapping."""
        raw = str(config.get("AUTH_TOKEN_CARRIER", TokenCarrier.HEADER.value)).strip().lower()
        try:
            carrier = TokenCarrier(raw)
        except ValueError:
            raise ConfigurationError(
                f"AUTH_TOKEN_CARRIER must be 'header' or 'cookie', got {raw!r}"
            ) from None
        return cls(
            carrier=carrier,
            cookie_name=config.get("AUTH_COOKIE_NAME", "Authorization"),
            cookie_secure=bool(config.get("AUTH_COOKIE_SECURE", False)),
            redirect_template=config.get(
                "OAUTH2_REDIRECT_URL_TEMPLATE", DEFAULT_REDIRECT_TEMPLATE
            ),
        )

    def extract(self, request: Request) -> str:
        """
        Return the raw token presented with ``request``.

        :raises MissingOrMalformedHeader: The configured carrier is absent or
            not of the form ``Bearer <token>``.
        """
        if self.carrier is TokenCarrier.COOKIE:
            value = request.cookies.get(self.cookie_name)
            if not value:
                raise MissingOrMalformedHeader()
            return decode_cookie_value(value)
        return parse_bearer(request.headers.get("Authorization"))

    def deliver(self, response: Response, issued: IssuedToken) -> Response:
        """Attach ``issued`` to a login response according to the carrier."""
        if self.carrier is TokenCarrier.COOKIE:
            response.set_cookie(
                self.cookie_name,
                encode_cookie_value(issued.token),
                max_age=issued.expires_in,
                path="/",
                secure=self.cookie_secure,
                httponly=True,
            )
        return response

    def clear(self, response: Response) -> Response:
        """Remove the auth cookie after logout (cookie carrier only)."""
        if self.carrier is TokenCarrier.COOKIE:
            response.delete_cookie(
                self.cookie_name, path="/", secure=self.cookie_secure, httponly=True
            )
        return response

    def delegated_redirect(self, issued: IssuedToken) -> Response:
        """Redirect a finished delegated login to the front end."""
        location = self.redirect_template.format(
            token=quote(issued.token, safe=""), ttl=issued.expires_in
        )
        return redirect(location, code=302)


def get_transport() -> TransportAdapter:
    """Return the adapter bound to the current application."""
    return current_app.extensions["auth_transport"]
