"""Expense domain service."""

from decimal import Decimal
from typing import Optional

from fleetledger.domain.entities import Expense
from fleetledger.domain.store import LedgerStore


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, store: LedgerStore):
        """Initialize expense service.

        Args:
            store: LedgerStore instance
        """
        self.store = store

    def save_expense(self, expense: Expense) -> Expense:
        """Create or update an expense.

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        return self.store.add_or_update(expense)

    def get_expense(self, expense_id: str) -> Optional[Expense]:
        """Get expense by ID, or None if not found."""
        return self.store.get_expense(expense_id)

    def delete_expense(self, expense_id: str) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense doesn't exist
        """
        self.store.delete("expense", expense_id)

    def list_expenses(
        self,
        month: Optional[str] = None,
        plate_number: Optional[str] = None,
        newest_first: bool = False,
    ) -> list[Expense]:
        """List expenses with filters.

        Args:
            month: Optional "YYYY-MM" month filter
            plate_number: Optional plate number filter (case-insensitive)
            newest_first: If True, most recently entered expenses come first

        Returns:
            List of expense entities
        """
        expenses = [
            expense
            for expense in self.store.expenses
            if (month is None or expense.date.isoformat().startswith(month))
            and (plate_number is None or expense.plate_number.lower() == plate_number.lower())
        ]
        if newest_first:
            expenses.reverse()
        return expenses

    def total_cost(self, month: Optional[str] = None, plate_number: Optional[str] = None) -> Decimal:
        """Sum the cost of the expenses matching the filters."""
        return sum(
            (e.cost for e in self.list_expenses(month=month, plate_number=plate_number)),
            Decimal("0"),
        )
