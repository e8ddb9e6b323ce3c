"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, g, jsonify, request

from streamauth.api.transport import get_transport
from streamauth.core.security import get_gateway
from streamauth.services.auth import Principal

F = TypeVar("F", bound=Callable[..., Any])


def authenticate_request() -> Principal:
    """Extract the token with the configured carrier and verify it.

    :raises MissingOrMalformedHeader: No usable carrier on the request.
    :raises MalformedToken | TokenExpired | TokenRevoked: From verification.
    """
    token = get_transport().extract(request)
    principal = get_gateway().verify(token)
    g.principal = principal
    return principal


def require_auth(func: F) -> F:
    """Ensure the request carries a valid, unexpired, unrevoked token."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        authenticate_request()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_principal() -> Principal:
    """Return the principal resolved by :func:`require_auth`."""
    principal = g.get("principal")
    if principal is None:
        raise RuntimeError("current_principal() used outside a @require_auth view.")
    return cast(Principal, principal)


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
