"""Required-field checks applied before an order or expense is saved."""

from fleetledger.domain.entities import Expense, Order
from fleetledger.domain.errors import ValidationError, invalid_fields


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_order(order: Order) -> None:
    """Check an order before saving.

    Date, client and vehicle are required and the price must be positive.
    The cost may be zero but not negative.

    Raises:
        ValidationError: Naming every field that failed
    """
    failed = []
    if order.date is None:
        failed.append("date")
    if _blank(order.client_name):
        failed.append("client_name")
    if _blank(order.vehicle):
        failed.append("vehicle")
    if order.price is None or order.price <= 0:
        failed.append("price")
    if order.cost is None or order.cost < 0:
        failed.append("cost")
    if failed:
        raise ValidationError(invalid_fields("order", failed), fields=failed)


def validate_expense(expense: Expense) -> None:
    """Check an expense before saving.

    Raises:
        ValidationError: Naming every field that failed
    """
    failed = []
    if expense.date is None:
        failed.append("date")
    if _blank(expense.plate_number):
        failed.append("plate_number")
    if expense.cost is None or expense.cost <= 0:
        failed.append("cost")
    if failed:
        raise ValidationError(invalid_fields("expense", failed), fields=failed)
