"""Domain layer for fleetledger application."""

from fleetledger.domain.store import LedgerStore
from fleetledger.domain.client import ClientService
from fleetledger.domain.order import OrderService
from fleetledger.domain.expense import ExpenseService
from fleetledger.domain.invoice import InvoiceService, assemble

__all__ = [
    "LedgerStore",
    "ClientService",
    "OrderService",
    "ExpenseService",
    "InvoiceService",
    "assemble",
]
