"""Client management commands."""

import click
from fleetledger.cli.client_resolution import resolve_client_or_exit
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.domain.errors import DomainError


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("add")
@click.argument("name", metavar="CLIENT_NAME")
@click.pass_context
def add_client(ctx, name: str):
    """Add a new client.

    Names are unique regardless of case.

    Examples:
        fleetledger client add "Acme Haulage"
    """
    service = ctx.obj["clients"]

    try:
        client = service.add_client(name)
        click.echo(f"Added client '{client.name}' (ID: {client.id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@client_group.command("list")
@click.pass_context
def list_clients(ctx):
    """List all clients."""
    service = ctx.obj["clients"]

    clients = service.list_clients()
    if not clients:
        click.echo("No clients found.")
        return

    click.echo("\nClients:")
    click.echo("-" * 60)
    for c in clients:
        click.echo(f"ID: {c.id:>13s} | {c.name}")


@client_group.command("remove")
@click.argument("client", metavar="CLIENT")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def remove_client(ctx, client: str, yes: bool) -> None:
    """Remove a client.

    CLIENT can be a client name or ID. Past orders for the client are kept
    and still appear on that client's invoices.

    Examples:
        fleetledger client remove "Acme Haulage"
        fleetledger client remove 1
    """
    service = ctx.obj["clients"]
    client_obj = resolve_client_or_exit(ctx, service, client)

    if not yes and not click.confirm(
        f"Are you sure you want to remove client '{client_obj.name}'? "
        "This will not delete their past orders."
    ):
        click.echo("Removal cancelled.")
        return

    previous = service.selection.invoice_client
    try:
        service.remove_client(client_obj.id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Removed client '{client_obj.name}'")
    current = service.selection.invoice_client
    if not current:
        click.echo("No clients remain.")
    elif current != previous:
        click.echo(f"Invoice client is now '{current}'")


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
