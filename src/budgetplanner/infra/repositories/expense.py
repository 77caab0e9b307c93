"""SQLModel implementation of the expense repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.expense import Expense
from ..database import SessionFactory


class SQLModelExpenseRepository:
    """Expense persistence; every query is scoped by ``user_id``."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def create(self, expense: Expense, *, user_id: int) -> Expense:
        """Persist a new expense owned by ``user_id``."""
        with self.session_factory() as session:
            expense.user_id = user_id
            session.add(expense)
            session.flush()
            session.refresh(expense)
            session.expunge(expense)
            return expense

    def get_by_id(self, expense_id: int, *, user_id: int) -> Optional[Expense]:
        with self.session_factory() as session:
            obj = session.exec(
                select(Expense)
                .where(Expense.id == expense_id)
                .where(Expense.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_for_user(self, *, user_id: int, category: Optional[str] = None) -> list[Expense]:
        """List expenses newest date first, optionally limited to one category."""
        with self.session_factory() as session:
            statement = select(Expense).where(Expense.user_id == user_id)
            if category:
                statement = statement.where(Expense.category == category)
            statement = statement.order_by(Expense.date.desc(), Expense.id.desc())  # type: ignore
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def delete(self, expense_id: int, *, user_id: int) -> int:
        """Delete the expense if ``user_id`` owns it; return rows removed."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Expense)
                .where(Expense.id == expense_id)
                .where(Expense.user_id == user_id)
            ).first()
            if obj is None:
                return 0
            session.delete(obj)
            return 1

    def distinct_categories(self, *, user_id: int) -> list[str]:
        with self.session_factory() as session:
            statement = (
                select(Expense.category)
                .where(Expense.user_id == user_id)
                .distinct()
                .order_by(Expense.category)
            )
            return list(session.exec(statement).all())
