"""Ledger store: user-scoped expense operations."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Union

from ..errors import ValidationError
from ..forms import ExpenseForm
from ..infra.repositories.expense import SQLModelExpenseRepository
from ..logging_config import get_logger
from ..models.expense import Expense

logger = get_logger(__name__)

# Largest value an SQL BIGINT primary key can hold.
MAX_EXPENSE_ID = 2**63 - 1

AmountInput = Union[str, int, float, Decimal, None]


class LedgerStore:
    """Adds, lists and deletes expenses for a single owner at a time."""

    def __init__(
        self,
        repo: SQLModelExpenseRepository,
        *,
        today: Callable[[], date] = date.today,
    ):
        self.repo = repo
        self.today = today

    def add_expense(
        self,
        user_id: int,
        title: Optional[str],
        amount: AmountInput,
        category: Optional[str] = None,
        date: Optional[str] = None,
    ) -> Expense:
        """Validate and persist an expense; raise ValidationError listing every problem."""

        form = ExpenseForm.from_mapping(
            {"title": title, "amount": amount, "category": category, "date": date}
        )
        if not form.validate(today=self.today()):
            raise ValidationError(form.errors)

        expense = self.repo.create(
            Expense(
                title=form.title,
                amount=form.amount,
                category=form.category,
                date=form.date,
            ),
            user_id=user_id,
        )
        logger.info(
            "Expense added",
            extra={"user_id": user_id, "expense_id": expense.id, "category": expense.category},
        )
        return expense

    def list_expenses(self, user_id: int, category: Optional[str] = None) -> list[Expense]:
        """Return the user's expenses, most recent date first."""

        return self.repo.list_for_user(user_id=user_id, category=category or None)

    def delete_expense(self, user_id: int, expense_id: int) -> int:
        """Delete an owned expense. Unknown or foreign ids are a no-op returning 0."""

        if not 0 < expense_id <= MAX_EXPENSE_ID:
            # Out of range for the id column, so no such row exists.
            return 0
        removed = self.repo.delete(expense_id, user_id=user_id)
        logger.info(
            "Expense delete requested",
            extra={"user_id": user_id, "expense_id": expense_id, "removed": removed},
        )
        return removed

    def distinct_categories(self, user_id: int) -> list[str]:
        return self.repo.distinct_categories(user_id=user_id)
