"""CLI helpers for client resolution and error handling."""

from __future__ import annotations

import click
from fleetledger.domain.client import ClientService
from fleetledger.domain.entities import Client
from fleetledger.domain.errors import NotFoundError
from fleetledger.utils.client_resolver import resolve_client


def resolve_client_or_exit(
    ctx: click.Context, client_service: ClientService, client: str
) -> Client:
    """Resolve client name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_client(client_service, client)
    except NotFoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
