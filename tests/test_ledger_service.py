"""Tests for the ledger store (expense operations)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from budgetplanner.errors import ValidationError
from budgetplanner.services.ledger import LedgerStore


@pytest.fixture
def ledger(expense_repo) -> LedgerStore:
    return LedgerStore(expense_repo, today=lambda: date(2024, 5, 1))


def test_add_expense_persists_trimmed_title_and_exact_amount(ledger, user):
    created = ledger.add_expense(user.id, "  Groceries ", "42.10", "Food", "2024-04-30")

    rows = ledger.list_expenses(user.id)
    assert [row.id for row in rows] == [created.id]
    assert rows[0].title == "Groceries"
    assert rows[0].amount == Decimal("42.10")
    assert rows[0].category == "Food"
    assert rows[0].date == "2024-04-30"
    assert rows[0].user_id == user.id


def test_add_expense_defaults(ledger, user):
    expense = ledger.add_expense(user.id, "Coffee", 3)

    assert expense.category == "Other"
    assert expense.date == "2024-05-01"
    assert expense.created_at is not None


@pytest.mark.parametrize("amount", ["0", "-5", "", "abc", None, "NaN", "Infinity", "1e30"])
def test_blank_title_and_bad_amount_report_both_errors(ledger, user, amount):
    with pytest.raises(ValidationError) as excinfo:
        ledger.add_expense(user.id, "   ", amount)

    assert excinfo.value.messages == ["Title is required", "Amount must be greater than 0"]
    assert ledger.list_expenses(user.id) == []


def test_invalid_date_is_reported(ledger, user):
    with pytest.raises(ValidationError) as excinfo:
        ledger.add_expense(user.id, "Rent", "900", date="05/01/2024")
    assert excinfo.value.messages == ["Date must be in YYYY-MM-DD format"]


def test_list_orders_by_date_descending(ledger, user):
    ledger.add_expense(user.id, "old", 1, date="2024-01-01")
    ledger.add_expense(user.id, "new", 1, date="2024-03-01")
    ledger.add_expense(user.id, "mid", 1, date="2024-02-01")

    assert [e.title for e in ledger.list_expenses(user.id)] == ["new", "mid", "old"]


def test_list_is_scoped_to_owner(ledger, user, other_user):
    ledger.add_expense(user.id, "mine", 1)
    ledger.add_expense(other_user.id, "theirs", 1)

    assert [e.title for e in ledger.list_expenses(user.id)] == ["mine"]
    assert [e.title for e in ledger.list_expenses(other_user.id)] == ["theirs"]


def test_category_filter_matches_exactly(ledger, user):
    ledger.add_expense(user.id, "Lunch", 12, "Food")
    ledger.add_expense(user.id, "Bus", 2, "Transport")
    ledger.add_expense(user.id, "Dinner", 30, "Food")
    ledger.add_expense(user.id, "Snacks", 4, "food")

    categories = ledger.distinct_categories(user.id)
    assert set(categories) == {"Food", "Transport", "food"}
    for category in categories:
        rows = ledger.list_expenses(user.id, category)
        assert rows
        assert all(row.category == category for row in rows)
    assert {e.title for e in ledger.list_expenses(user.id, "Food")} == {"Lunch", "Dinner"}


def test_distinct_categories_is_per_user(ledger, user, other_user):
    ledger.add_expense(user.id, "Lunch", 12, "Food")
    ledger.add_expense(other_user.id, "Movie", 10, "Fun")

    assert ledger.distinct_categories(user.id) == ["Food"]


def test_delete_own_expense(ledger, user):
    expense = ledger.add_expense(user.id, "Lunch", 12)

    assert ledger.delete_expense(user.id, expense.id) == 1
    assert ledger.list_expenses(user.id) == []


def test_delete_foreign_expense_is_a_no_op(ledger, user, other_user):
    theirs = ledger.add_expense(other_user.id, "Movie", 10)

    assert ledger.delete_expense(user.id, theirs.id) == 0
    assert [e.id for e in ledger.list_expenses(other_user.id)] == [theirs.id]


def test_delete_missing_expense_is_a_no_op(ledger, user):
    assert ledger.delete_expense(user.id, 9999) == 0


@pytest.mark.parametrize("expense_id", [0, -1, int("9" * 30)])
def test_delete_out_of_range_id_is_a_no_op(ledger, user, expense_id):
    kept = ledger.add_expense(user.id, "Lunch", 12)

    assert ledger.delete_expense(user.id, expense_id) == 0
    assert [e.id for e in ledger.list_expenses(user.id)] == [kept.id]


@pytest.mark.parametrize("title, category", [("Rent\nDue", "Home"), ("Rent", "Ho\rme")])
def test_line_breaks_are_rejected(ledger, user, title, category):
    with pytest.raises(ValidationError) as excinfo:
        ledger.add_expense(user.id, title, "5", category)

    assert len(excinfo.value.messages) == 1
    assert "line breaks" in excinfo.value.messages[0]
    assert ledger.list_expenses(user.id) == []
