"""Pytest fixtures building an isolated application per test.

Every test gets a fresh Flask app, so revocation state (which lives on
``app.extensions``) and the in-memory SQLite schema never leak between cases.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

import pytest
from flask import Flask

from streamauth.core.config import TestingConfig
from streamauth.core.extensions import db as _db
from streamauth.factory import create_app
from streamauth.services._shared.ports import (
    InMemoryCredentialRepository,
    InMemoryRevocationStore,
    StubTokenCodec,
)
from streamauth.services.auth import AuthenticationGateway
from streamauth.services.credentials import CredentialVerifier
from tests.helpers.clock import FrozenClock

# Cheap hashing keeps the suite fast; production defaults to scrypt.
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Keeps revocations in process memory; no Redis, no sweeper thread.
    - Disables rate limiting unless a test opts back in.
    """

    PASSWORD_HASH_METHOD = FAST_HASH_METHOD
    LOG_LEVEL = "WARNING"
    USE_PROXYFIX = False


def build_app(**overrides: Any) -> Flask:
    """Create an app from :class:`TestConfig` with per-test overrides."""
    config = type("OverriddenTestConfig", (TestConfig,), overrides)
    return create_app(config, instance_relative_config=False)


@pytest.fixture()
def app_factory():
    """Return a builder for apps with custom settings (tables created)."""

    created: list[Any] = []

    def _factory(**overrides: Any) -> Flask:
        application = build_app(**overrides)
        ctx = application.app_context()
        ctx.push()
        _db.create_all()
        created.append(ctx)
        return application

    yield _factory

    for ctx in reversed(created):
        _db.session.remove()
        _db.drop_all()
        ctx.pop()


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a Flask application configured for testing.

    Yields
    ------
    flask.Flask
        Application with :class:`TestConfig` applied, an active app context
        and all tables created.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    application = build_app()
    with application.app_context():
        _db.create_all()
        yield application
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db(app: Flask):
    """Database extension bound to the testing application."""
    return _db


@pytest.fixture()
def client(app: Flask):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def gateway(app: Flask) -> AuthenticationGateway:
    """The gateway wired by the application factory."""
    return app.extensions["auth_gateway"]


# -- Framework-free doubles ----------------------------------------------------
@pytest.fixture()
def clock() -> FrozenClock:
    """Manually advanced clock starting at a fixed instant."""
    return FrozenClock(datetime(2024, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture()
def verifier() -> CredentialVerifier:
    return CredentialVerifier(method=FAST_HASH_METHOD)


@pytest.fixture()
def credentials(verifier: CredentialVerifier) -> InMemoryCredentialRepository:
    """Credential store holding a single account, ``ana@example.com``."""
    repo = InMemoryCredentialRepository()
    repo.add("ana@example.com", subject="42", password_hash=verifier.hash("abc123!@"))
    return repo


@pytest.fixture()
def stub_gateway(clock, credentials, verifier) -> AuthenticationGateway:
    """
    Build an AuthenticationGateway wired to in-memory doubles.

    .. note::
       Codec, store and gateway share ``clock`` so expiry can be driven
       deterministically with :meth:`FrozenClock.advance`.
    """
    return AuthenticationGateway(
        codec=StubTokenCodec(clock),
        revocations=InMemoryRevocationStore(clock),
        credentials=credentials,
        verifier=verifier,
        clock=clock,
    )
