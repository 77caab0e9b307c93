"""Form validation helpers for expenses and paychecks.

Validation runs before anything reaches the database; column constraints are
only a second line of defence.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from .models.expense import DEFAULT_CATEGORY
from .models.paycheck import DEFAULT_DESCRIPTION

CENTS = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999.99")
DATE_FORMAT = "%Y-%m-%d"

TITLE_REQUIRED = "Title is required"
AMOUNT_POSITIVE = "Amount must be greater than 0"
AMOUNT_TOO_LARGE = "Amount is too large"
DATE_FORMAT_INVALID = "Date must be in YYYY-MM-DD format"
TITLE_TOO_LONG = "Title must be 255 characters or fewer"
CATEGORY_TOO_LONG = "Category must be 64 characters or fewer"
TITLE_CONTROL_CHARS = "Title cannot contain line breaks or control characters"
CATEGORY_CONTROL_CHARS = "Category cannot contain line breaks or control characters"

# The text report is line oriented, so stored text must stay on one line.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def parse_amount(raw: Any) -> Optional[Decimal]:
    """Parse ``raw`` into a positive amount rounded to cents, or None."""

    text = _as_text(raw).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
        if not value.is_finite():
            return None
        # Exponent forms like 1e30 overflow the context precision here.
        value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        return None
    if value <= 0:
        return None
    return value


def _bind(data: Mapping[str, Any], keys: tuple[str, ...]) -> dict[str, str]:
    return {key: _as_text(data.get(key)) for key in keys}


@dataclass(slots=True)
class ExpenseForm:
    """Represents expense input prior to validation."""

    title: str = ""
    amount: Optional[Decimal] = None
    category: str = DEFAULT_CATEGORY
    date: str = ""
    errors: list[str] = field(default_factory=list, init=False)
    raw_data: dict[str, str] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ExpenseForm:
        """Create a form populated from request data."""

        form = cls()
        form.load(data)
        return form

    def load(self, data: Mapping[str, Any]) -> None:
        """Bind incoming mapping data to the form state."""

        self.raw_data = _bind(data, ("title", "amount", "category", "date"))
        self.title = self.raw_data["title"].strip()

    def validate(self, *, today: Optional[date] = None) -> bool:
        """Validate the bound data, collecting every violated rule."""

        self.errors.clear()

        self.title = self.raw_data.get("title", "").strip()
        if not self.title:
            self.errors.append(TITLE_REQUIRED)
        elif len(self.title) > 255:
            self.errors.append(TITLE_TOO_LONG)
        elif _CONTROL_CHARS.search(self.title):
            self.errors.append(TITLE_CONTROL_CHARS)

        self.amount = parse_amount(self.raw_data.get("amount"))
        if self.amount is None:
            self.errors.append(AMOUNT_POSITIVE)
        elif self.amount > MAX_AMOUNT:
            self.errors.append(AMOUNT_TOO_LARGE)
            self.amount = None

        self.category = self.raw_data.get("category", "").strip() or DEFAULT_CATEGORY
        if len(self.category) > 64:
            self.errors.append(CATEGORY_TOO_LONG)
        elif _CONTROL_CHARS.search(self.category):
            self.errors.append(CATEGORY_CONTROL_CHARS)

        date_raw = self.raw_data.get("date", "").strip()
        if not date_raw:
            self.date = (today or date.today()).isoformat()
        else:
            try:
                self.date = datetime.strptime(date_raw, DATE_FORMAT).date().isoformat()
            except ValueError:
                self.date = ""
                self.errors.append(DATE_FORMAT_INVALID)

        return not self.errors


@dataclass(slots=True)
class PaycheckForm:
    """Paycheck input; only the amount is checked."""

    amount: Optional[Decimal] = None
    description: str = DEFAULT_DESCRIPTION
    raw_data: dict[str, str] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PaycheckForm:
        form = cls()
        form.raw_data = _bind(data, ("amount", "description"))
        return form

    def validate(self) -> bool:
        self.amount = parse_amount(self.raw_data.get("amount"))
        if self.amount is not None and self.amount > MAX_AMOUNT:
            self.amount = None
        self.description = self.raw_data.get("description", "").strip()[:255] or DEFAULT_DESCRIPTION
        return self.amount is not None
