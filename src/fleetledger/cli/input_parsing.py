"""CLI helpers for parsing dates, months and amounts, or exiting on bad input."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import click
from fleetledger.utils.amount_parser import parse_amount
from fleetledger.utils.date_parser import parse_date, parse_month


def parse_date_or_exit(ctx: click.Context, value: str) -> date:
    """Parse a date option, or exit with a CLI error."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def parse_month_or_exit(ctx: click.Context, value: str) -> str:
    """Parse a month option into YYYY-MM, or exit with a CLI error."""
    try:
        return parse_month(value)
    except ValueError as e:
        click.echo(f"Error: Invalid month: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str, label: str) -> Decimal:
    """Parse an amount option, or exit with a CLI error."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
