"""Dashboard aggregation: totals, savings and a savings suggestion."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Sequence

from ..models.expense import Expense
from ..models.paycheck import Paycheck

ZERO = Decimal("0")
GREAT_SAVINGS_RATIO = Decimal("0.2")

SUGGEST_ADD_PAYCHECKS = "Add your paychecks to track savings."
SUGGEST_GREAT_JOB = "Great job! saving more than 20% of your income!"
SUGGEST_ON_TRACK = "You are on track, try to save a little more each month."
SUGGEST_OVERSPENDING = "You are spending more than you earn. Try cutting costs."


@dataclass(frozen=True, slots=True)
class Summary:
    total_expenses: Decimal
    total_income: Decimal
    savings: Decimal
    suggestion: str


@dataclass(frozen=True, slots=True)
class DashboardView:
    """Everything the dashboard template needs."""

    username: str
    expenses: Sequence[Expense]
    summary: Summary
    categories: Sequence[str] = field(default_factory=tuple)
    active_category: str = ""

    @property
    def total(self) -> Decimal:
        return self.summary.total_expenses


def _sum_amounts(rows: Iterable[Expense | Paycheck]) -> Decimal:
    return sum((Decimal(row.amount) for row in rows), ZERO)


def suggest(total_income: Decimal, savings: Decimal) -> str:
    """Pick the suggestion; the first matching rule wins."""

    if total_income == 0:
        return SUGGEST_ADD_PAYCHECKS
    if savings > total_income * GREAT_SAVINGS_RATIO:
        return SUGGEST_GREAT_JOB
    if savings >= 0:
        return SUGGEST_ON_TRACK
    return SUGGEST_OVERSPENDING


def summarize(expenses: Iterable[Expense], paychecks: Iterable[Paycheck]) -> Summary:
    """Aggregate expenses and paychecks. Pure; no I/O."""

    total_expenses = _sum_amounts(expenses)
    total_income = _sum_amounts(paychecks)
    savings = total_income - total_expenses
    return Summary(
        total_expenses=total_expenses,
        total_income=total_income,
        savings=savings,
        suggestion=suggest(total_income, savings),
    )


def build_dashboard(
    *,
    username: str,
    expenses: Sequence[Expense],
    paychecks: Sequence[Paycheck],
    categories: Sequence[str],
    active_category: str | None = None,
) -> DashboardView:
    """Assemble the dashboard view-model.

    Totals cover ``expenses`` as passed in, so a category filter narrows them too.
    """

    return DashboardView(
        username=username,
        expenses=expenses,
        summary=summarize(expenses, paychecks),
        categories=tuple(categories),
        active_category=active_category or "",
    )
