"""Completion of delegated (OAuth2) logins."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from streamauth.api.deps import timing
from streamauth.api.transport import get_transport
from streamauth.core.errors import NotImplementedFeature
from streamauth.core.security import get_gateway
from streamauth.services._shared.ports import IdentityProvider

bp = Blueprint("oauth2", __name__)


def _provider(name: str) -> IdentityProvider:
    providers: dict[str, IdentityProvider] = current_app.extensions.get("identity_providers", {})
    provider = providers.get(name)
    if provider is None:
        raise NotImplementedFeature(f"Identity provider '{name}' is not configured")
    return provider


@bp.get("/callback/<provider>")
@timing
def callback(provider: str):
    """Turn a successful provider handshake into a token and redirect with it."""

    principal = _provider(provider).complete_login(request)
    issued = get_gateway().login_delegated(principal)
    return get_transport().delegated_redirect(issued)
