"""Expense routes: add, delete and text export."""

from __future__ import annotations

from flask import Response, flash, jsonify, redirect, render_template, request, url_for

from ...errors import StorageUnavailable, ValidationError
from ...extensions import get_services
from ...guards import current_identity, login_required
from ...logging_config import get_logger
from ...services.reports import REPORT_FILENAME, REPORT_MIMETYPE, render_text
from . import bp

logger = get_logger(__name__)

EXPENSE_ADDED = "Expense added successfully!"
_FORM_FIELDS = ("title", "amount", "category", "date")


@bp.get("/add")
@login_required
def new_expense():
    return render_template("add.html", errors=[], form={})


@bp.post("/add")
@login_required
def create_expense():
    """Persist an expense or re-render the form with every validation error."""

    identity = current_identity()
    submitted = {key: request.form.get(key, "") for key in _FORM_FIELDS}
    try:
        get_services().ledger.add_expense(identity.user_id, **submitted)
    except ValidationError as exc:
        return render_template("add.html", errors=exc.messages, form=submitted), 400

    flash(EXPENSE_ADDED, "success")
    return redirect(url_for("home.index"))


@bp.delete("/delete/<expense_id>")
@login_required
def delete_expense(expense_id: str):
    """Delete an owned expense. Unknown or foreign ids still report success."""

    identity = current_identity()
    try:
        parsed_id = int(expense_id)
    except ValueError:
        # No expense can have this id, so there is nothing to delete.
        return jsonify({"success": True})

    try:
        get_services().ledger.delete_expense(identity.user_id, parsed_id)
    except StorageUnavailable:
        logger.exception("Failed to delete expense %s", expense_id)
        return jsonify({"success": False}), 500
    return jsonify({"success": True})


@bp.get("/download/txt")
@login_required
def download_txt():
    identity = current_identity()
    expenses = get_services().ledger.list_expenses(identity.user_id)
    return Response(
        render_text(expenses),
        mimetype=REPORT_MIMETYPE,
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )
