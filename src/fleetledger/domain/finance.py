"""Balance and unpaid-total calculations.

``balance`` and ``unpaid_total`` agree for every current combination of
payment method and paid flag, but they are separate operations and must stay
that way: a change to one must not silently change the other.
"""

from decimal import Decimal
from typing import Iterable

from fleetledger.domain.entities import Order, PaymentMethod

ZERO = Decimal("0")


def matches(order: Order, client: str, month: str) -> bool:
    """Check whether an order belongs to a client's month.

    The client must match exactly. The month is a plain prefix match on the
    ISO date string, so "2024-05" selects every order dated 2024-05-xx.
    """
    if order.date is None:
        return False
    return order.client_name == client and order.date.isoformat().startswith(month)


def balance(order: Order) -> Decimal:
    """Outstanding amount on a single order.

    Only postpaid orders that are still unpaid carry a balance.
    """
    if order.payment_method == PaymentMethod.POSTPAID and not order.paid:
        return order.price
    return ZERO


def unpaid_total(orders: Iterable[Order], client: str, month: str) -> Decimal:
    """Sum the price of a client's unpaid postpaid orders for a month."""
    return sum(
        (
            order.price
            for order in orders
            if matches(order, client, month)
            and order.payment_method == PaymentMethod.POSTPAID
            and not order.paid
        ),
        ZERO,
    )
