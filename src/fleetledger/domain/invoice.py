"""Invoice assembly."""

from typing import Optional, Sequence
from datetime import date

from fleetledger.domain.entities import Invoice, InvoiceLine, Order
from fleetledger.domain.errors import NoDataError, no_orders_for, selection_required
from fleetledger.domain.finance import balance, matches, unpaid_total
from fleetledger.domain.store import LedgerStore
from fleetledger.utils.date_parser import recent_months


def assemble(orders: Sequence[Order], client: str, month: str) -> Invoice:
    """Build a client's statement for a month.

    Orders keep the order they were entered in; they are not re-sorted by
    date.

    Args:
        orders: All orders to choose from
        client: Client name, matched exactly
        month: Month as "YYYY-MM", matched as a prefix of the order date

    Returns:
        Invoice with one line per matching order

    Raises:
        NoDataError: If client or month is unset, or no order matches
    """
    if not client or not month:
        raise NoDataError(selection_required())

    lines = tuple(
        InvoiceLine(order=order, balance=balance(order))
        for order in orders
        if matches(order, client, month)
    )
    if not lines:
        raise NoDataError(no_orders_for(client, month))

    return Invoice(
        client=client,
        month=month,
        line_items=lines,
        total_unpaid=unpaid_total(orders, client, month),
    )


class InvoiceService:
    """Service for building statements from the current orders."""

    def __init__(self, store: LedgerStore):
        """Initialize invoice service.

        Args:
            store: LedgerStore instance
        """
        self.store = store

    def build_invoice(self, client: str, month: str) -> Invoice:
        """Assemble the invoice for a client and month.

        Raises:
            NoDataError: If client or month is unset, or no order matches
        """
        return assemble(self.store.orders, client, month)

    def available_months(self, today: Optional[date] = None) -> list[str]:
        """Months offered for invoicing: the last twelve, newest first."""
        return recent_months(12, today=today)
