"""Invoice commands."""

import re
from pathlib import Path

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.input_parsing import parse_month_or_exit
from fleetledger.cli.render import render_statement
from fleetledger.domain.errors import DomainError
from fleetledger.domain.invoice import InvoiceService

_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|\x00-\x1f]")


def safe_filename(name: str) -> str:
    """Replace characters that cannot appear in a file name with underscores."""
    name = _UNSAFE_FILENAME_CHARS.sub("_", name)
    return name.strip(". ") or "invoice"


def _build_or_exit(ctx, client: str | None, month: str):
    """Assemble the requested invoice, defaulting to the selected client."""
    if client is None:
        client = ctx.obj["clients"].selection.invoice_client
    service = InvoiceService(ctx.obj["store"])
    try:
        return service.build_invoice(client, parse_month_or_exit(ctx, month))
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.group()
def invoice_group():
    """Produce monthly client statements."""
    pass


@invoice_group.command("show")
@click.option("--client", help="Client name as stored on the orders (defaults to the selected client)")
@click.option("--month", default="this month", show_default=True, help="Month (YYYY-MM, 'last month', ...)")
@click.pass_context
def show_invoice(ctx, client: str | None, month: str):
    """Print a client's statement for a month.

    Orders are matched on the client name they were saved with, so orders of
    a removed client can still be invoiced.

    Examples:
        fleetledger invoice show --client "Mutwali" --month 2024-05
    """
    invoice = _build_or_exit(ctx, client, month)
    click.echo(render_statement(invoice), nl=False)


@invoice_group.command("export")
@click.option("--client", help="Client name as stored on the orders (defaults to the selected client)")
@click.option("--month", default="this month", show_default=True, help="Month (YYYY-MM, 'last month', ...)")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory to write the statement to",
)
@click.pass_context
def export_invoice(ctx, client: str | None, month: str, output_dir: Path):
    """Write a client's statement to <client>_Invoice_<month>.txt."""
    invoice = _build_or_exit(ctx, client, month)

    path = output_dir / f"{safe_filename(invoice.filename)}.txt"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(render_statement(invoice), encoding="utf-8")
    except OSError as e:
        click.echo(f"Error: Could not write {path}: {e.strerror or e}", err=True)
        ctx.exit(1)
    click.echo(f"Wrote {click.format_filename(path)}")


@invoice_group.command("months")
@click.pass_context
def list_months(ctx):
    """List the months available for invoicing, newest first."""
    service = InvoiceService(ctx.obj["store"])
    for month in service.available_months():
        click.echo(month)


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
