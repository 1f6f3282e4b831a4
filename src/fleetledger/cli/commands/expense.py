"""Expense commands."""

from dataclasses import replace

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.input_parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_month_or_exit,
)
from fleetledger.cli.render import format_amount
from fleetledger.domain.entities import Expense, ExpenseType
from fleetledger.domain.errors import DomainError
from fleetledger.domain.expense import ExpenseService

TYPE_CHOICES = click.Choice([t.value for t in ExpenseType], case_sensitive=False)


def _echo_expense(expense: Expense) -> None:
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Plate: {expense.plate_number}")
    click.echo(f"  Type: {expense.type.value}")
    click.echo(f"  Cost: {format_amount(expense.cost)}")
    if expense.description:
        click.echo(f"  Description: {expense.description}")


@click.group()
def expense_group():
    """Manage operating expenses."""
    pass


@expense_group.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--plate", "plate_number", required=True, help="Vehicle plate number")
@click.option("--type", "expense_type", type=TYPE_CHOICES, default="Diesel", show_default=True, help="Expense type")
@click.option("--cost", required=True, help="Amount spent")
@click.option("--description", default="", help="Description")
@click.pass_context
def add_expense(ctx, date: str, plate_number: str, expense_type: str, cost: str, description: str):
    """Add an operating expense.

    Examples:
        fleetledger expense add --plate "KRT 1234" --cost 80
        fleetledger expense add --plate "KRT 1234" --type "Spare Parts" --cost 420 --description "Brake pads"
    """
    service = ExpenseService(ctx.obj["store"])

    expense = Expense(
        date=parse_date_or_exit(ctx, date),
        plate_number=plate_number,
        type=ExpenseType.from_str(expense_type),
        cost=parse_amount_or_exit(ctx, cost, "cost"),
        description=description,
    )

    try:
        saved = service.save_expense(expense)
        click.echo(f"Created expense {saved.id}")
        _echo_expense(saved)
    except DomainError as e:
        handle_domain_error(ctx, e)


@expense_group.command("edit")
@click.argument("expense_id", metavar="EXPENSE_ID")
@click.option("--date", help="New expense date")
@click.option("--plate", "plate_number", help="New plate number")
@click.option("--type", "expense_type", type=TYPE_CHOICES, help="New expense type")
@click.option("--cost", help="New cost")
@click.option("--description", help="New description")
@click.pass_context
def edit_expense(
    ctx,
    expense_id: str,
    date: str | None,
    plate_number: str | None,
    expense_type: str | None,
    cost: str | None,
    description: str | None,
):
    """Edit an expense in place."""
    service = ExpenseService(ctx.obj["store"])

    existing = service.get_expense(expense_id)
    if existing is None:
        click.echo(f"Error: Expense {expense_id} not found", err=True)
        ctx.exit(1)

    changes = {}
    if date is not None:
        changes["date"] = parse_date_or_exit(ctx, date)
    if plate_number is not None:
        changes["plate_number"] = plate_number
    if expense_type is not None:
        changes["type"] = ExpenseType.from_str(expense_type)
    if cost is not None:
        changes["cost"] = parse_amount_or_exit(ctx, cost, "cost")
    if description is not None:
        changes["description"] = description

    if not changes:
        click.echo("Nothing to update.")
        return

    try:
        saved = service.save_expense(replace(existing, **changes))
        click.echo(f"Updated expense {saved.id}")
        _echo_expense(saved)
    except DomainError as e:
        handle_domain_error(ctx, e)


@expense_group.command("list")
@click.option("--month", help="Only expenses in this month (YYYY-MM, 'this month', 'last month')")
@click.option("--plate", "plate_number", help="Only expenses for this plate number")
@click.pass_context
def list_expenses(ctx, month: str | None, plate_number: str | None):
    """List expenses, most recently entered first."""
    service = ExpenseService(ctx.obj["store"])

    month_filter = parse_month_or_exit(ctx, month) if month else None
    expenses = service.list_expenses(month=month_filter, plate_number=plate_number, newest_first=True)
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"{'ID':<13}  {'Date':<10}  {'Plate':<12}  {'Type':<12}  {'Cost':>10}  Description")
    click.echo("-" * 90)
    for e in expenses:
        click.echo(
            f"{e.id:<13}  {e.date.isoformat():<10}  {e.plate_number[:12]:<12}  {e.type.value:<12}  "
            f"{format_amount(e.cost):>10}  {e.description}"
        )
    click.echo("-" * 90)
    total = service.total_cost(month=month_filter, plate_number=plate_number)
    click.echo(f"Total: {format_amount(total)}")


@expense_group.command("delete")
@click.argument("expense_id", metavar="EXPENSE_ID")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_expense(ctx, expense_id: str, yes: bool) -> None:
    """Delete an expense."""
    service = ExpenseService(ctx.obj["store"])

    if service.get_expense(expense_id) is None:
        click.echo(f"Error: Expense {expense_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm("Are you sure you want to delete this expense?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_expense(expense_id)
        click.echo(f"Deleted expense {expense_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
