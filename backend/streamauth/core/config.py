"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Placeholder shipped for local runs; production refuses to start with it.
PLACEHOLDER_JWT_SECRET: Final[str] = "CHANGE_ME_JWT"


# Load .env in development (no-op when absent)
load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised at startup when a mandatory setting is missing or unusable."""


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {val!r}") from exc


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret used for session signing.
    JWT_SECRET_KEY: str
        Process-wide signing key for bearer tokens. Loaded once at startup;
        changing it invalidates every outstanding token.
    JWT_ALGORITHM: str
        Signature algorithm passed to ``flask-jwt-extended``.
    AUTH_TOKEN_TTL: int
        Lifetime of issued tokens in seconds. Local and delegated logins share
        it so downstream verification never depends on the login path.
    AUTH_TOKEN_CARRIER: str
        ``"header"`` (``Authorization: Bearer``) or ``"cookie"``.
    AUTH_COOKIE_NAME: str
        Cookie name used by the cookie carrier.
    AUTH_COOKIE_SECURE: bool
        ``Secure`` attribute of the auth cookie.
    OAUTH2_REDIRECT_URL_TEMPLATE: str
        Redirect issued after a delegated login. ``{token}`` and ``{ttl}``
        are substituted.
    REDIS_URL: str | None
        When set, revocations are kept in Redis instead of process memory.
    REVOCATION_SWEEP_INTERVAL: int
        Seconds between background sweeps of the in-memory revocation store;
        ``0`` disables the sweeper.
    AUTH_LOGIN_RATE_LIMIT: str
        Flask-Limiter expression applied to the login endpoint.
    SQLALCHEMY_DATABASE_URI: str
        Database connection string for the user store.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", PLACEHOLDER_JWT_SECRET)
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_TOKEN_LOCATION = ["headers"]

    # Token lifecycle
    AUTH_TOKEN_TTL = env_int("AUTH_TOKEN_TTL", 3600)
    AUTH_TOKEN_CARRIER = os.getenv("AUTH_TOKEN_CARRIER", "header")
    AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME", "Authorization")
    AUTH_COOKIE_SECURE = env_bool("AUTH_COOKIE_SECURE", False)
    OAUTH2_REDIRECT_URL_TEMPLATE = os.getenv(
        "OAUTH2_REDIRECT_URL_TEMPLATE",
        "http://localhost:3000/auth/oauth-response/{token}/{ttl}",
    )
    REDIS_URL = os.getenv("REDIS_URL") or None
    REVOCATION_SWEEP_INTERVAL = env_int("REVOCATION_SWEEP_INTERVAL", 300)

    # Rate limiting
    AUTH_LOGIN_RATE_LIMIT = os.getenv("AUTH_LOGIN_RATE_LIMIT", "5 per minute")
    RATELIMIT_ENABLED = env_bool("RATELIMIT_ENABLED", True)
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./dev.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and honors ``SQLALCHEMY_ECHO`` for verbose
    SQL logging when requested.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Keeps revocations in memory and disables the background sweeper and
      login rate limiting so runs stay deterministic.
    """

    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = "testing-signing-key-with-enough-entropy"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = True
    REDIS_URL = None
    REVOCATION_SWEEP_INTERVAL = 0
    RATELIMIT_ENABLED = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug and SQL echoing disabled. The auth cookie is marked
    ``Secure`` unless explicitly overridden.
    """

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False
    AUTH_COOKIE_SECURE = env_bool("AUTH_COOKIE_SECURE", True)


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def validate_signing_key(config: Mapping[str, object]) -> str:
    """Return the configured signing key or fail fast.

    :param config: Flask ``app.config`` mapping.
    :returns: The non-empty signing key.
    :raises ConfigurationError: When the key is missing, blank, or still the
        development placeholder outside debug/testing.
    """
    key = config.get("JWT_SECRET_KEY")
    if not isinstance(key, str) or not key.strip():
        raise ConfigurationError("JWT_SECRET_KEY must be set to a non-empty string.")
    relaxed = bool(config.get("DEBUG")) or bool(config.get("TESTING"))
    if key == PLACEHOLDER_JWT_SECRET and not relaxed:
        raise ConfigurationError("JWT_SECRET_KEY still holds the development placeholder.")
    return key
