"""Shared pytest fixtures for fleetledger tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fleetledger.database.base import Database, PersistenceError
from fleetledger.database.factories import create_sqlite_database
from fleetledger.domain.client import ClientService
from fleetledger.domain.entities import Order, PaymentMethod
from fleetledger.domain.expense import ExpenseService
from fleetledger.domain.invoice import InvoiceService
from fleetledger.domain.order import OrderService
from fleetledger.domain.store import LedgerStore


class MemoryDatabase(Database):
    """Dict-backed database whose writes can be made to fail."""

    def __init__(self, collections=None):
        self.collections = dict(collections or {})
        self.fail_saves = False
        self.save_calls = []

    def connect(self):
        pass

    def disconnect(self):
        pass

    def initialize_schema(self):
        pass

    def load(self, collection):
        records = self.collections.get(collection)
        return None if records is None else [dict(r) for r in records]

    def save(self, collection, records):
        self.save_calls.append(collection)
        if self.fail_saves:
            raise PersistenceError(f"disk full while saving {collection}")
        self.collections[collection] = [dict(r) for r in records]


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_db():
    """Create an in-memory database with no saved collections."""
    return MemoryDatabase()


@pytest.fixture
def store(temp_db):
    """Create a LedgerStore over the temporary database (default clients)."""
    return LedgerStore(temp_db)


@pytest.fixture
def empty_store(temp_db):
    """Create a LedgerStore that starts with no clients at all."""
    temp_db.save("clients", [])
    return LedgerStore(temp_db)


@pytest.fixture
def client_service(store):
    """Create a ClientService over the store."""
    return ClientService(store)


@pytest.fixture
def order_service(store):
    """Create an OrderService over the store."""
    return OrderService(store)


@pytest.fixture
def expense_service(store):
    """Create an ExpenseService over the store."""
    return ExpenseService(store)


@pytest.fixture
def invoice_service(store):
    """Create an InvoiceService over the store."""
    return InvoiceService(store)


def make_order(**overrides) -> Order:
    """Build a valid order, overriding selected fields."""
    fields = dict(
        date=date(2024, 5, 10),
        vehicle="TRK-12",
        client_name="Acme",
        price=Decimal("100"),
        order_type="Towing",
        location="Port",
        cost=Decimal("40"),
        payment_method=PaymentMethod.POSTPAID,
        paid=False,
    )
    fields.update(overrides)
    return Order(**fields)


@pytest.fixture
def acme_orders(store):
    """Store the two Acme orders for May 2024 (one postpaid unpaid, one cash)."""
    store.add_client("Acme")
    first = store.add_or_update(make_order())
    second = store.add_or_update(
        make_order(
            date=date(2024, 5, 20),
            price=Decimal("50"),
            payment_method=PaymentMethod.CASH,
            paid=True,
        )
    )
    return [first, second]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def reload_store(temp_db):
    """Return a function that reads the temporary database afresh."""

    def _reload() -> LedgerStore:
        db = create_sqlite_database(database_path=temp_db.database_path)
        try:
            return LedgerStore(db)
        finally:
            db.disconnect()

    return _reload


@pytest.fixture
def order_factory():
    """Return a builder for valid orders."""
    return make_order
