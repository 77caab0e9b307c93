"""Plain-text expense report."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterable, NamedTuple

from ..models.expense import Expense

REPORT_FILENAME = "expenses.txt"
REPORT_MIMETYPE = "text/plain"
CURRENCY_PREFIX = "$"

_RULE = "-------------------------"
REPORT_HEADER = f"Budget Planner\n{_RULE}\n\nExpense Report\n{_RULE}\n\n"

_RECORD_PATTERN = re.compile(
    r"^Title: (?P<title>.*)\n"
    r"Amount: \$(?P<amount>-?[0-9]+(?:\.[0-9]+)?)\n"
    r"Category: (?P<category>.*)\n"
    r"Date: (?P<date>.*)\n",
    re.MULTILINE,
)


class ReportLine(NamedTuple):
    title: str
    amount: Decimal
    category: str
    date: str


def format_amount(amount: Decimal | float | int) -> str:
    return f"{CURRENCY_PREFIX}{Decimal(amount):.2f}"


def render_text(expenses: Iterable[Expense]) -> str:
    """Render expenses in the order given: four lines each, blank line between."""

    parts = [REPORT_HEADER]
    for expense in expenses:
        parts.append(
            f"Title: {expense.title}\n"
            f"Amount: {format_amount(expense.amount)}\n"
            f"Category: {expense.category}\n"
            f"Date: {expense.date}\n\n"
        )
    return "".join(parts)


def parse_text(document: str) -> list[ReportLine]:
    """Read a rendered report back into (title, amount, category, date) rows."""

    body = document[len(REPORT_HEADER):] if document.startswith(REPORT_HEADER) else document
    return [
        ReportLine(
            title=match["title"],
            amount=Decimal(match["amount"]),
            category=match["category"],
            date=match["date"],
        )
        for match in _RECORD_PATTERN.finditer(body)
    ]
