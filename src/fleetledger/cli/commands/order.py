"""Order commands."""

from dataclasses import replace

import click
from fleetledger.cli.client_resolution import resolve_client_or_exit
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.input_parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_month_or_exit,
)
from fleetledger.cli.render import format_amount
from fleetledger.domain.entities import Order, PaymentMethod
from fleetledger.domain.errors import DomainError
from fleetledger.domain.finance import balance
from fleetledger.domain.order import OrderService

PAYMENT_CHOICES = click.Choice([m.value for m in PaymentMethod], case_sensitive=False)


def _echo_order(order: Order) -> None:
    click.echo(f"  Date: {order.date}")
    click.echo(f"  Client: {order.client_name}")
    click.echo(f"  Vehicle: {order.vehicle}")
    if order.order_type:
        click.echo(f"  Type: {order.order_type}")
    if order.location:
        click.echo(f"  Location: {order.location}")
    click.echo(f"  Cost: {format_amount(order.cost)}")
    click.echo(f"  Price: {format_amount(order.price)}")
    click.echo(f"  Payment: {order.payment_method.value} ({'paid' if order.paid else 'unpaid'})")


@click.group()
def order_group():
    """Manage service orders."""
    pass


@order_group.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Order date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--vehicle", required=True, help="Vehicle used for the order")
@click.option("--client", help="Client name or ID (defaults to the selected client)")
@click.option("--type", "order_type", default="", help="Order type (free text)")
@click.option("--location", default="", help="Location")
@click.option("--cost", default="0", show_default=True, help="Cost of carrying out the order")
@click.option("--price", required=True, help="Price charged to the client")
@click.option("--payment", type=PAYMENT_CHOICES, default="Cash", show_default=True, help="Payment method")
@click.option("--paid/--unpaid", default=True, show_default=True, help="Whether the order is paid")
@click.pass_context
def add_order(
    ctx,
    date: str,
    vehicle: str,
    client: str | None,
    order_type: str,
    location: str,
    cost: str,
    price: str,
    payment: str,
    paid: bool,
):
    """Add a service order.

    Examples:
        fleetledger order add --vehicle "TRK-12" --client "Mutwali" --price 250
        fleetledger order add --date 2024-05-10 --vehicle "TRK-12" --price 100 --payment postpaid --unpaid
    """
    client_service = ctx.obj["clients"]
    service = OrderService(ctx.obj["store"])

    if client is None:
        client_name = client_service.selection.draft_client
    else:
        client_name = resolve_client_or_exit(ctx, client_service, client).name

    order = Order(
        date=parse_date_or_exit(ctx, date),
        vehicle=vehicle,
        client_name=client_name,
        order_type=order_type,
        location=location,
        cost=parse_amount_or_exit(ctx, cost, "cost"),
        price=parse_amount_or_exit(ctx, price, "price"),
        payment_method=PaymentMethod.from_str(payment),
        paid=paid,
    )

    try:
        saved = service.save_order(order)
        click.echo(f"Created order {saved.id}")
        _echo_order(saved)
    except DomainError as e:
        handle_domain_error(ctx, e)


@order_group.command("edit")
@click.argument("order_id", metavar="ORDER_ID")
@click.option("--date", help="New order date")
@click.option("--vehicle", help="New vehicle")
@click.option("--client", help="New client name or ID")
@click.option("--type", "order_type", help="New order type")
@click.option("--location", help="New location")
@click.option("--cost", help="New cost")
@click.option("--price", help="New price")
@click.option("--payment", type=PAYMENT_CHOICES, help="New payment method")
@click.option("--paid/--unpaid", default=None, help="Mark the order paid or unpaid")
@click.pass_context
def edit_order(
    ctx,
    order_id: str,
    date: str | None,
    vehicle: str | None,
    client: str | None,
    order_type: str | None,
    location: str | None,
    cost: str | None,
    price: str | None,
    payment: str | None,
    paid: bool | None,
):
    """Edit an order in place.

    Only the given options change; the order keeps its place in the list.

    Examples:
        fleetledger order edit 1715300000000 --paid
        fleetledger order edit 1715300000000 --price 120 --location "North yard"
    """
    service = OrderService(ctx.obj["store"])

    existing = service.get_order(order_id)
    if existing is None:
        click.echo(f"Error: Order {order_id} not found", err=True)
        ctx.exit(1)

    changes = {}
    if date is not None:
        changes["date"] = parse_date_or_exit(ctx, date)
    if vehicle is not None:
        changes["vehicle"] = vehicle
    if client is not None:
        changes["client_name"] = resolve_client_or_exit(ctx, ctx.obj["clients"], client).name
    if order_type is not None:
        changes["order_type"] = order_type
    if location is not None:
        changes["location"] = location
    if cost is not None:
        changes["cost"] = parse_amount_or_exit(ctx, cost, "cost")
    if price is not None:
        changes["price"] = parse_amount_or_exit(ctx, price, "price")
    if payment is not None:
        changes["payment_method"] = PaymentMethod.from_str(payment)
    if paid is not None:
        changes["paid"] = paid

    if not changes:
        click.echo("Nothing to update.")
        return

    try:
        saved = service.save_order(replace(existing, **changes))
        click.echo(f"Updated order {saved.id}")
        _echo_order(saved)
    except DomainError as e:
        handle_domain_error(ctx, e)


@order_group.command("list")
@click.option("--client", help="Only orders for this client name (exact match)")
@click.option("--month", help="Only orders in this month (YYYY-MM, 'this month', 'last month')")
@click.pass_context
def list_orders(ctx, client: str | None, month: str | None):
    """List orders, most recently entered first."""
    service = OrderService(ctx.obj["store"])

    month_filter = parse_month_or_exit(ctx, month) if month else None
    orders = service.list_orders(client=client, month=month_filter, newest_first=True)
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(
        f"{'ID':<13}  {'Date':<10}  {'Vehicle':<10}  {'Client':<16}  {'Type':<12}  "
        f"{'Price':>10}  {'Payment':<8}  {'Paid':<4}  {'Balance':>10}"
    )
    click.echo("-" * 110)
    for o in orders:
        click.echo(
            f"{o.id:<13}  {o.date.isoformat():<10}  {o.vehicle[:10]:<10}  {o.client_name[:16]:<16}  "
            f"{o.order_type[:12]:<12}  {format_amount(o.price):>10}  {o.payment_method.value:<8}  "
            f"{'Yes' if o.paid else 'No':<4}  {format_amount(balance(o)):>10}"
        )


@order_group.command("delete")
@click.argument("order_id", metavar="ORDER_ID")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_order(ctx, order_id: str, yes: bool) -> None:
    """Delete an order.

    Examples:
        fleetledger order delete 1715300000000
    """
    service = OrderService(ctx.obj["store"])

    if service.get_order(order_id) is None:
        click.echo(f"Error: Order {order_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm("Are you sure you want to delete this order?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_order(order_id)
        click.echo(f"Deleted order {order_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register order commands with main CLI."""
    cli.add_command(order_group, name="order")
