"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

import redis  # type: ignore[import-untyped]
from flask import Flask
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_sqlalchemy import SQLAlchemy
from redis.exceptions import RedisError  # type: ignore[import-untyped]
from sqlalchemy import MetaData

from streamauth.core.config import ConfigurationError, validate_signing_key

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
jwt = JWTManager()
limiter = Limiter(key_func=get_remote_address)


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, JWT, rate limiting and the optional Redis client.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`streamauth.models` package so SQLAlchemy metadata is complete.

    Raises
    ------
    ConfigurationError
        If the token signing key is missing, or ``REDIS_URL`` is set but the
        server cannot be reached. Both abort startup instead of failing per
        request.
    """
    validate_signing_key(app.config)

    db.init_app(app)

    # Ensure models are imported so create_all() sees metadata
    from streamauth import models as _models  # noqa: F401

    jwt.init_app(app)
    limiter.init_app(app)

    # Per-app client; core.security picks the revocation backend from it.
    redis_url = app.config.get("REDIS_URL")
    if not redis_url:
        return

    client = redis.Redis.from_url(redis_url)
    try:
        client.ping()
    except RedisError as exc:
        raise ConfigurationError(f"Failed to connect to Redis at {redis_url!r}") from exc
    app.extensions["redis_client"] = client
