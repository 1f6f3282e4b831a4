"""In-memory entity store for clients, orders and expenses."""

import logging
import time
from dataclasses import replace
from typing import Any, Callable, Optional, Union

from fleetledger.database.base import CLIENTS, EXPENSES, ORDERS, Database, PersistenceError
from fleetledger.database.mappers import (
    client_to_domain,
    client_to_record,
    expense_to_domain,
    expense_to_record,
    order_to_domain,
    order_to_record,
)
from fleetledger.domain.entities import Client, Expense, Order
from fleetledger.domain.errors import (
    DuplicateNameError,
    EmptyNameError,
    NotFoundError,
    client_not_found,
    duplicate_client_name,
    record_not_found,
)
from fleetledger.domain.validation import validate_expense, validate_order

logger = logging.getLogger(__name__)

# Used when no client collection has ever been saved
DEFAULT_CLIENTS = (
    Client(id="1", name="Hassan Bobo"),
    Client(id="2", name="Omar Shareif"),
    Client(id="3", name="Muhi Aldein"),
    Client(id="4", name="Khalifa Shareif"),
    Client(id="5", name="Mutwali"),
)

Record = Union[Order, Expense]

_KINDS = {
    "order": ORDERS,
    "expense": EXPENSES,
    Order: ORDERS,
    Expense: EXPENSES,
}


class LedgerStore:
    """Owns the three collections and enforces their invariants.

    Collections are loaded from the database when the store is created.
    Every successful mutation writes the affected collection back; a failed
    write is logged and the in-memory change stands.
    """

    def __init__(self, db: Database):
        """Initialize the store and load all collections.

        Args:
            db: Database instance

        Raises:
            PersistenceError: If a collection cannot be read
        """
        self.db = db

        stored_clients = db.load(CLIENTS)
        if stored_clients is None:
            self._clients = list(DEFAULT_CLIENTS)
        else:
            self._clients = [client_to_domain(r) for r in stored_clients]
        self._orders = [order_to_domain(r) for r in db.load(ORDERS) or []]
        self._expenses = [expense_to_domain(r) for r in db.load(EXPENSES) or []]

        self._last_id = 0
        for entity in (*self._clients, *self._orders, *self._expenses):
            if entity.id is not None and entity.id.isdigit():
                self._last_id = max(self._last_id, int(entity.id))

        logger.debug(
            "Loaded %d client(s), %d order(s), %d expense(s)",
            len(self._clients),
            len(self._orders),
            len(self._expenses),
        )

    @property
    def clients(self) -> tuple[Client, ...]:
        return tuple(self._clients)

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    def _next_id(self) -> str:
        """Generate a millisecond-timestamp identifier, strictly increasing."""
        candidate = time.time_ns() // 1_000_000
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def _collection(self, name: str) -> list[Any]:
        return {CLIENTS: self._clients, ORDERS: self._orders, EXPENSES: self._expenses}[name]

    def _persist(self, name: str) -> None:
        """Write a collection back to the database, logging failures."""
        to_record: Callable[[Any], dict[str, Any]] = {
            CLIENTS: client_to_record,
            ORDERS: order_to_record,
            EXPENSES: expense_to_record,
        }[name]
        records = [to_record(entity) for entity in self._collection(name)]
        try:
            self.db.save(name, records)
        except PersistenceError as e:
            logger.warning("Keeping unsaved changes to '%s' in memory: %s", name, e)

    @staticmethod
    def _find(items: list[Any], entity_id: Optional[str]) -> Optional[int]:
        if entity_id is None:
            return None
        for index, item in enumerate(items):
            if item.id == entity_id:
                return index
        return None

    # Order and expense operations
    def add_or_update(self, entity: Record) -> Record:
        """Save an order or expense.

        An entity whose id matches a stored record replaces it in place.
        Anything else is appended under a freshly generated id.

        Args:
            entity: Order or Expense to save

        Returns:
            The stored entity, carrying its id

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        if isinstance(entity, Order):
            validate_order(entity)
            name = ORDERS
        elif isinstance(entity, Expense):
            validate_expense(entity)
            name = EXPENSES
        else:
            raise TypeError(f"Cannot store {type(entity).__name__}")

        items = self._collection(name)
        index = self._find(items, entity.id)
        if index is not None:
            items[index] = entity
            logger.info("Updated %s %s", name[:-1], entity.id)
        else:
            entity = replace(entity, id=self._next_id())
            items.append(entity)
            logger.info("Added %s %s", name[:-1], entity.id)

        self._persist(name)
        return entity

    def delete(self, kind: Union[str, type], entity_id: str) -> None:
        """Delete an order or expense by id.

        Args:
            kind: "order" or "expense" (or the entity class)
            entity_id: Record ID

        Raises:
            NotFoundError: If no record has that id
        """
        try:
            name = _KINDS[kind]
        except KeyError:
            raise ValueError(f"Unknown record kind: {kind!r}") from None

        items = self._collection(name)
        index = self._find(items, entity_id)
        if index is None:
            raise NotFoundError(record_not_found(name[:-1], entity_id))
        del items[index]
        logger.info("Deleted %s %s", name[:-1], entity_id)
        self._persist(name)

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get order by ID, or None if not found."""
        index = self._find(self._orders, order_id)
        return None if index is None else self._orders[index]

    def get_expense(self, expense_id: str) -> Optional[Expense]:
        """Get expense by ID, or None if not found."""
        index = self._find(self._expenses, expense_id)
        return None if index is None else self._expenses[index]

    # Client operations
    def add_client(self, name: str) -> Client:
        """Add a client.

        Args:
            name: Client name; surrounding whitespace is removed

        Returns:
            The new client

        Raises:
            EmptyNameError: If the name is blank
            DuplicateNameError: If a client with the same name exists, ignoring case
        """
        name = name.strip()
        if not name:
            raise EmptyNameError()
        if self.find_client_by_name(name) is not None:
            raise DuplicateNameError(duplicate_client_name(name))

        client = Client(id=self._next_id(), name=name)
        self._clients.append(client)
        logger.info("Added client %s (%s)", client.name, client.id)
        self._persist(CLIENTS)
        return client

    def remove_client(self, client_id: str) -> Client:
        """Remove a client.

        Orders that name the client are kept unchanged.

        Returns:
            The removed client

        Raises:
            NotFoundError: If no client has that id
        """
        index = self._find(self._clients, client_id)
        if index is None:
            raise NotFoundError(client_not_found(client_id))
        client = self._clients.pop(index)
        logger.info("Removed client %s (%s)", client.name, client.id)
        self._persist(CLIENTS)
        return client

    def get_client(self, client_id: str) -> Optional[Client]:
        """Get client by ID, or None if not found."""
        index = self._find(self._clients, client_id)
        return None if index is None else self._clients[index]

    def find_client_by_name(self, name: str) -> Optional[Client]:
        """Get client by name, ignoring case and surrounding whitespace."""
        wanted = name.strip().lower()
        for client in self._clients:
            if client.name.lower() == wanted:
                return client
        return None
