"""Income store: user-scoped paycheck operations."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Optional, Union

from ..forms import PaycheckForm
from ..infra.repositories.paycheck import SQLModelPaycheckRepository
from ..logging_config import get_logger
from ..models.paycheck import Paycheck

logger = get_logger(__name__)


class IncomeStore:
    """Records paychecks.

    Invalid amounts are dropped without an error: callers just redirect.
    """

    def __init__(
        self,
        repo: SQLModelPaycheckRepository,
        *,
        today: Callable[[], date] = date.today,
    ):
        self.repo = repo
        self.today = today

    def add_paycheck(
        self,
        user_id: int,
        amount: Union[str, int, float, Decimal, None],
        description: Optional[str] = None,
    ) -> Optional[Paycheck]:
        form = PaycheckForm.from_mapping({"amount": amount, "description": description})
        if not form.validate():
            logger.info("Paycheck skipped: invalid amount", extra={"user_id": user_id})
            return None

        paycheck = self.repo.create(
            Paycheck(amount=form.amount, description=form.description, date=self.today()),
            user_id=user_id,
        )
        logger.info("Paycheck added", extra={"user_id": user_id, "paycheck_id": paycheck.id})
        return paycheck

    def list_paychecks(self, user_id: int) -> list[Paycheck]:
        return self.repo.list_for_user(user_id=user_id)


def total_income(paychecks: Iterable[Paycheck]) -> Decimal:
    """Sum paycheck amounts."""

    return sum((Decimal(p.amount) for p in paychecks), Decimal("0"))
