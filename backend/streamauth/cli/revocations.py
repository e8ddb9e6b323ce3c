"""Flask CLI commands for inspecting and pruning the revocation store."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

from streamauth.core.security import get_gateway

LOGGER = logging.getLogger(__name__)


@click.group("revocations")
def revocations_cli() -> None:
    """Inspect and maintain revoked-token state."""


@revocations_cli.command("status")
@with_appcontext
def status() -> None:
    """Show the configured backend and how many entries it retains."""
    store = get_gateway().revocations
    click.echo(f"backend={type(store).__name__} entries={len(store)}")


@revocations_cli.command("sweep")
@with_appcontext
def sweep() -> None:
    """Drop entries whose token has already expired."""
    store = get_gateway().revocations
    evicted = store.sweep()
    LOGGER.info("auth.revocation.sweep", extra={"evicted": evicted})
    click.echo(f"Evicted {evicted} expired revocation(s); {len(store)} remaining.")
