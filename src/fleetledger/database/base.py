"""Abstract persistence gateway interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

ORDERS = "orders"
EXPENSES = "expenses"
CLIENTS = "clients"

COLLECTIONS = (ORDERS, EXPENSES, CLIENTS)


class PersistenceError(Exception):
    """A collection could not be read from or written to the store."""


class Database(ABC):
    """Abstract key-value store holding one record list per collection."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def load(self, collection: str) -> Optional[list[dict[str, Any]]]:
        """Load the records of a collection.

        Returns None when the collection has never been saved, which callers
        treat differently from an empty collection.
        """
        pass

    @abstractmethod
    def save(self, collection: str, records: list[dict[str, Any]]) -> None:
        """Replace the stored records of a collection.

        Raises:
            PersistenceError: If the write fails
        """
        pass
