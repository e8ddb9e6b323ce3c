"""HTTP surface: versioned blueprints plus the token transport helpers."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def _join_prefix(base: str, rel: str) -> str:
    segments = [s for s in (base.strip("/"), rel.strip("/")) if s]
    return "/" + "/".join(segments)


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Mount ``(blueprint, relative_prefix)`` pairs under ``base_prefix``.

    An empty relative prefix mounts the blueprint at the version root, which
    is where ``/health`` lives.
    """
    for bp, rel_prefix in entries:
        app.register_blueprint(bp, url_prefix=_join_prefix(base_prefix, rel_prefix))


def init_app(app: Flask) -> None:
    """Register ``/api/v1`` (user, oauth2 and health blueprints)."""

    from streamauth.api.v1 import API_VERSION, REGISTRY

    api_base = app.config.get("API_BASE_PREFIX", "/api")
    register_blueprint_group(app, base_prefix=f"{api_base}/{API_VERSION}", entries=REGISTRY)


__all__ = ["init_app", "register_blueprint_group"]
