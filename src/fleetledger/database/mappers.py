"""Mapper functions to convert between domain entities and stored records.

Stored records keep the field names of the original browser storage format
(``clientName``, ``paymentMethod``, ...) so existing exports load unchanged.
Amounts are written as decimal strings and read back from strings or numbers.
"""

from datetime import date
from decimal import Decimal
from typing import Any

from fleetledger.domain import entities as domain


def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _to_date(value: Any) -> date:
    return date.fromisoformat(str(value))


def client_to_record(client: domain.Client) -> dict[str, Any]:
    """Convert domain Client entity to a stored record."""
    return {"id": client.id, "name": client.name}


def client_to_domain(record: dict[str, Any]) -> domain.Client:
    """Convert stored record to domain Client entity."""
    return domain.Client(id=str(record["id"]), name=record["name"])


def order_to_record(order: domain.Order) -> dict[str, Any]:
    """Convert domain Order entity to a stored record."""
    return {
        "id": order.id,
        "date": order.date.isoformat(),
        "vehicle": order.vehicle,
        "clientName": order.client_name,
        "orderType": order.order_type,
        "location": order.location,
        "cost": str(order.cost),
        "price": str(order.price),
        "paymentMethod": order.payment_method.value,
        "paid": order.paid,
    }


def order_to_domain(record: dict[str, Any]) -> domain.Order:
    """Convert stored record to domain Order entity."""
    return domain.Order(
        id=str(record["id"]),
        date=_to_date(record["date"]),
        vehicle=record["vehicle"],
        client_name=record["clientName"],
        order_type=record.get("orderType", ""),
        location=record.get("location", ""),
        cost=_to_decimal(record.get("cost", 0)),
        price=_to_decimal(record["price"]),
        payment_method=domain.PaymentMethod(record["paymentMethod"]),
        paid=bool(record["paid"]),
    )


def expense_to_record(expense: domain.Expense) -> dict[str, Any]:
    """Convert domain Expense entity to a stored record."""
    return {
        "id": expense.id,
        "date": expense.date.isoformat(),
        "plateNumber": expense.plate_number,
        "type": expense.type.value,
        "cost": str(expense.cost),
        "description": expense.description,
    }


def expense_to_domain(record: dict[str, Any]) -> domain.Expense:
    """Convert stored record to domain Expense entity."""
    return domain.Expense(
        id=str(record["id"]),
        date=_to_date(record["date"]),
        plate_number=record["plateNumber"],
        type=domain.ExpenseType(record["type"]),
        cost=_to_decimal(record["cost"]),
        description=record.get("description", ""),
    )
