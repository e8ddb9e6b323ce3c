"""JSON logging with per-request correlation ids.

Auth events are logged with structured ``extra`` fields (``subject``,
``jti``, ``origin``, ``reason``...). Only keys listed in ``EXTRA_KEYS`` reach
the output, so a token passed as ``extra`` by mistake is dropped.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import IO, Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

EXTRA_KEYS = ("endpoint", "elapsed_ms", "subject", "origin", "jti", "reason", "evicted")


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def __init__(self, extra_keys: Iterable[str] = EXTRA_KEYS) -> None:
        super().__init__()
        self.extra_keys = tuple(extra_keys)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update(
            {key: getattr(record, key) for key in self.extra_keys if hasattr(record, key)}
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp ``request_id`` on every record (``None`` outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def _incoming_request_id() -> str | None:
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return None


def ensure_request_id() -> str:
    """Return the request's correlation id, adopting or minting one once."""
    if not has_request_context():
        return str(uuid4())
    request_id = g.get("request_id")
    if request_id is None:
        request_id = _incoming_request_id() or str(uuid4())
        g.request_id = request_id
    return request_id


def configure_logging(level: str | int = "INFO", stream: IO[str] | None = None) -> None:
    """Replace root handlers with a single JSON handler at ``level``."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def init_app(app: Flask) -> None:
    """Seed a request id before each request and echo it on the response."""
    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = ["EXTRA_KEYS", "JSONFormatter", "configure_logging", "ensure_request_id", "init_app"]
