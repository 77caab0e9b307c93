"""Paycheck routes."""

from __future__ import annotations

from flask import redirect, render_template, request, url_for

from ...extensions import get_services
from ...guards import current_identity, login_required
from ...services.income import total_income
from . import bp


@bp.get("/paychecks")
@login_required
def list_paychecks():
    identity = current_identity()
    paychecks = get_services().income.list_paychecks(identity.user_id)
    return render_template("paychecks.html", paychecks=paychecks, total_pay=total_income(paychecks))


@bp.post("/paychecks")
@login_required
def create_paycheck():
    """Record a paycheck; an invalid amount just returns to the paycheck page."""

    identity = current_identity()
    paycheck = get_services().income.add_paycheck(
        identity.user_id,
        request.form.get("amount", ""),
        request.form.get("description", ""),
    )
    if paycheck is None:
        return redirect(url_for("paychecks.list_paychecks"))
    return redirect(url_for("home.index"))
