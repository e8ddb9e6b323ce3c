"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .auth import bp as user_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .oauth2 import bp as oauth2_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/v1
    (user_bp, "/user"),  # -> /api/v1/user
    (oauth2_bp, "/oauth2"),  # -> /api/v1/oauth2
]
