"""Build the token lifecycle components once per application."""

from __future__ import annotations

import atexit
import logging
from datetime import timedelta

from flask import Flask, current_app

from streamauth.api.transport import TransportAdapter
from streamauth.infra.jwt import JWTTokenCodec
from streamauth.infra.redis import RedisRevocationStore
from streamauth.repositories.user import UserRepository
from streamauth.services._shared.ports import (
    IdentityProvider,
    InMemoryRevocationStore,
    RevocationStore,
)
from streamauth.services.auth import AuthenticationGateway, RevocationSweeper
from streamauth.services.credentials import CredentialVerifier

log = logging.getLogger(__name__)


def build_revocation_store(app: Flask) -> RevocationStore:
    """Use Redis when a client was configured, otherwise process memory."""
    client = app.extensions.get("redis_client")
    if client is not None:
        return RedisRevocationStore(client)
    return InMemoryRevocationStore()


def init_app(app: Flask) -> None:
    """
    Construct the gateway, transport adapter and optional sweeper.

    Everything is stored on ``app.extensions`` so each app (and each test)
    gets its own revocation state. Must run after
    :func:`streamauth.core.extensions.init_app`.
    """
    store = build_revocation_store(app)
    gateway = AuthenticationGateway(
        codec=JWTTokenCodec(),
        revocations=store,
        credentials=UserRepository(),
        verifier=CredentialVerifier(method=app.config.get("PASSWORD_HASH_METHOD", "scrypt")),
        token_ttl=timedelta(seconds=int(app.config.get("AUTH_TOKEN_TTL", 3600))),
    )
    app.extensions["auth_gateway"] = gateway
    app.extensions["auth_transport"] = TransportAdapter.from_config(app.config)

    interval = int(app.config.get("REVOCATION_SWEEP_INTERVAL", 0))
    if interval > 0 and isinstance(store, InMemoryRevocationStore):
        sweeper = RevocationSweeper(store, interval)
        sweeper.start()
        atexit.register(sweeper.stop)
        app.extensions["revocation_sweeper"] = sweeper

    log.info(
        "auth.configured store=%s carrier=%s",
        type(store).__name__,
        app.extensions["auth_transport"].carrier.value,
    )


def register_identity_provider(app: Flask, provider: IdentityProvider) -> None:
    """Make ``provider`` available at ``/oauth2/callback/<provider.name>``."""
    app.extensions.setdefault("identity_providers", {})[provider.name] = provider


def get_gateway() -> AuthenticationGateway:
    """Return the gateway bound to the current application."""
    return current_app.extensions["auth_gateway"]


__all__ = [
    "build_revocation_store",
    "get_gateway",
    "init_app",
    "register_identity_provider",
]
