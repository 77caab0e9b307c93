"""Landing page, dashboard and health probe."""

from __future__ import annotations

from flask import jsonify, render_template, request

from ...extensions import get_services
from ...guards import current_identity
from ...services.summary import build_dashboard
from . import bp


@bp.get("/")
def index():
    """Landing page for visitors, dashboard for signed-in users."""

    identity = current_identity()
    if identity is None:
        return render_template("home.html")

    services = get_services()
    category = (request.args.get("category") or "").strip()
    view = build_dashboard(
        username=identity.username,
        expenses=services.ledger.list_expenses(identity.user_id, category or None),
        paychecks=services.income.list_paychecks(identity.user_id),
        categories=services.ledger.distinct_categories(identity.user_id),
        active_category=category,
    )
    return render_template("index.html", view=view)


@bp.get("/health")
def health():
    return jsonify({"ok": True})
