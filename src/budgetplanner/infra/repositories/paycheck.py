"""SQLModel implementation of the paycheck repository."""

from __future__ import annotations

from sqlmodel import select

from ...models.paycheck import Paycheck
from ..database import SessionFactory


class SQLModelPaycheckRepository:
    """Paycheck persistence scoped by owner."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def create(self, paycheck: Paycheck, *, user_id: int) -> Paycheck:
        with self.session_factory() as session:
            paycheck.user_id = user_id
            session.add(paycheck)
            session.flush()
            session.refresh(paycheck)
            session.expunge(paycheck)
            return paycheck

    def list_for_user(self, *, user_id: int) -> list[Paycheck]:
        """List paychecks newest first."""
        with self.session_factory() as session:
            statement = (
                select(Paycheck)
                .where(Paycheck.user_id == user_id)
                .order_by(Paycheck.date.desc(), Paycheck.id.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows
