"""Order domain service."""

from dataclasses import replace
from typing import Optional

from fleetledger.domain.entities import Order
from fleetledger.domain.errors import ValidationError
from fleetledger.domain.finance import matches
from fleetledger.domain.store import LedgerStore


class OrderService:
    """Service for managing orders."""

    def __init__(self, store: LedgerStore):
        """Initialize order service.

        Args:
            store: LedgerStore instance
        """
        self.store = store

    def save_order(self, order: Order) -> Order:
        """Create or update an order.

        New orders, and edits that change the client, must name an existing
        client, and are stored under that client's name as it was added.
        An edit that keeps the client name may keep a name whose client has
        since been removed.

        Args:
            order: Order to save; an id matching a stored order updates it

        Returns:
            The stored order

        Raises:
            ValidationError: If a required field is missing or the client is unknown
        """
        existing = self.store.get_order(order.id) if order.id is not None else None
        client_changed = existing is None or existing.client_name != order.client_name
        if client_changed and order.client_name and order.client_name.strip():
            client = self.store.find_client_by_name(order.client_name)
            if client is None:
                raise ValidationError(
                    f"Client '{order.client_name}' not found", fields=("client_name",)
                )
            order = replace(order, client_name=client.name)
        return self.store.add_or_update(order)

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get order by ID, or None if not found."""
        return self.store.get_order(order_id)

    def delete_order(self, order_id: str) -> None:
        """Delete an order.

        Raises:
            NotFoundError: If the order doesn't exist
        """
        self.store.delete("order", order_id)

    def list_orders(
        self,
        client: Optional[str] = None,
        month: Optional[str] = None,
        newest_first: bool = False,
    ) -> list[Order]:
        """List orders with filters.

        Args:
            client: Optional exact client name filter
            month: Optional "YYYY-MM" month filter
            newest_first: If True, most recently entered orders come first

        Returns:
            List of order entities
        """
        orders = [
            order
            for order in self.store.orders
            if (client is None or order.client_name == client)
            and (month is None or matches(order, order.client_name, month))
        ]
        if newest_first:
            orders.reverse()
        return orders
