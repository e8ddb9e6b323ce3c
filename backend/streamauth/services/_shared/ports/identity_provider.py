from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from flask import Request

    from streamauth.services.auth.principal import DelegatedPrincipal


class IdentityProvider(Protocol):
    """
    Port to an external OAuth2 identity provider client.

    The handshake (authorization redirect, code exchange, profile fetch) is
    owned by the client library; this port only exposes its outcome.
    Implementations raise
    :class:`~streamauth.services._shared.errors.IdentityProviderError` when
    the callback does not carry an authenticated user.
    """

    name: str

    def complete_login(self, request: Request) -> DelegatedPrincipal: ...
