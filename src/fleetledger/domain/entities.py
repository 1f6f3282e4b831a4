"""Domain model entities for fleetledger.

These are pure data classes representing business concepts, independent of
how the collections are stored. Orders refer to clients by name only, so an
order keeps rendering its stored client name after that client is removed.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class PaymentMethod(str, Enum):
    """How an order is settled."""

    CASH = "Cash"
    POSTPAID = "Postpaid"

    @classmethod
    def from_str(cls, value: str) -> "PaymentMethod":
        """Coerce arbitrary casing into a payment method."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unsupported payment method: {value}")


class ExpenseType(str, Enum):
    """Operating cost categories."""

    DIESEL = "Diesel"
    MAINTENANCE = "Maintenance"
    SPARE_PARTS = "Spare Parts"
    SALARY = "Salary"
    OTHER = "Other"

    @classmethod
    def from_str(cls, value: str) -> "ExpenseType":
        """Coerce arbitrary casing (and dashes or underscores) into an expense type."""
        normalised = value.strip().lower().replace("-", " ").replace("_", " ")
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported expense type: {value}")


@dataclass(frozen=True)
class Client:
    """Named billing party."""

    id: str
    name: str


@dataclass(frozen=True)
class Order:
    """Billable service transaction against a client and vehicle."""

    date: Optional[date]
    vehicle: str
    client_name: str
    price: Decimal
    order_type: str = ""
    location: str = ""
    cost: Decimal = Decimal("0")
    payment_method: PaymentMethod = PaymentMethod.CASH
    paid: bool = True
    id: Optional[str] = None


@dataclass(frozen=True)
class Expense:
    """Operating cost transaction against a vehicle."""

    date: Optional[date]
    plate_number: str
    cost: Decimal
    type: ExpenseType = ExpenseType.DIESEL
    description: str = ""
    id: Optional[str] = None


@dataclass(frozen=True)
class InvoiceLine:
    """An order on a statement together with its outstanding balance."""

    order: Order
    balance: Decimal

    @property
    def date(self) -> Optional[date]:
        return self.order.date

    @property
    def vehicle(self) -> str:
        return self.order.vehicle

    @property
    def order_type(self) -> str:
        return self.order.order_type

    @property
    def location(self) -> str:
        return self.order.location

    @property
    def price(self) -> Decimal:
        return self.order.price

    @property
    def payment_method(self) -> PaymentMethod:
        return self.order.payment_method


@dataclass(frozen=True)
class Invoice:
    """Monthly statement of a client's orders. Derived, never stored."""

    client: str
    month: str
    line_items: tuple[InvoiceLine, ...]
    total_unpaid: Decimal

    @property
    def filename(self) -> str:
        """Base file name used when the statement is exported."""
        return f"{self.client}_Invoice_{self.month}"

    @property
    def month_label(self) -> str:
        """Long month name, e.g. 'May 2024'."""
        try:
            return datetime.strptime(self.month, "%Y-%m").strftime("%B %Y")
        except ValueError:
            return self.month

    @property
    def total_price(self) -> Decimal:
        return sum((line.price for line in self.line_items), Decimal("0"))
