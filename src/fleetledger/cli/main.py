"""Main CLI entry point."""

import logging

import click
from fleetledger.database.factories import create_sqlite_database
from fleetledger.domain.store import LedgerStore
from fleetledger.domain.client import ClientService

# Import and register all commands at module level
from fleetledger.cli.commands import client, order, expense, invoice


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FLEETLEDGER_DB_PATH environment variable)",
    envvar="FLEETLEDGER_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FLEETLEDGER_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Fleetledger - Orders, expenses and monthly client invoices.

    Record service orders and operating expenses for your vehicles, and
    produce a statement of each client's orders for a month.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        store = LedgerStore(db)
        ctx.obj["db"] = db
        ctx.obj["store"] = store
        ctx.obj["clients"] = ClientService(store)


# Register all commands
client.register_commands(cli)
order.register_commands(cli)
expense.register_commands(cli)
invoice.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
