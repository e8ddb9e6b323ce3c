"""Cross-origin policy for the auth API."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from streamauth.core.logger import REQUEST_ID_HEADER


def allowed_origins(raw: str | None) -> list[str] | None:
    """Split ``CORS_ORIGINS``; ``None`` means any origin (``""`` or ``"*"``)."""
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    if not origins or origins == ["*"]:
        return None
    return origins


def init_app(app: Flask) -> None:
    """Apply CORS to ``/api/*``.

    Browsers only send the auth cookie cross-origin with credentials
    enabled, and credentials cannot be combined with a wildcard origin. So
    the cookie carrier works for explicitly listed front ends only; a
    wildcard policy still serves header-carrier clients.
    """
    origins = allowed_origins(app.config.get("CORS_ORIGINS"))
    CORS(
        app,
        resources={r"/api/*": {"origins": origins or "*"}},
        supports_credentials=origins is not None,
        allow_headers=["Authorization", "Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
        methods=["GET", "POST", "OPTIONS"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
