"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from sqlalchemy import text

from streamauth.api.deps import json_response, timing
from streamauth.core.extensions import db
from streamauth.core.security import get_gateway

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application, database and revocation-store health."""

    db_status = "ok"
    try:
        db.session.execute(text("SELECT 1"))
    except Exception:  # pragma: no cover - depends on DB backend
        current_app.logger.exception("healthcheck.db_error")
        db_status = "fail"
    payload = {
        "status": "ok",
        "db": db_status,
        "revocations": type(get_gateway().revocations).__name__,
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload)
