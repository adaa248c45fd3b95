from flask import Blueprint, jsonify, request
from ...extensions import db
from ...services import BudgetTracker
from ...validators import parse_month_key, require_fields

budgets_bp = Blueprint("budgets", __name__, url_prefix="/api/budgets")


@budgets_bp.route("", methods=["GET"])
def budgets_for_month():
    month = parse_month_key(request.args.get("month"))
    return jsonify(BudgetTracker(db.session).by_month(month))


@budgets_bp.route("", methods=["POST"])
def set_budget():
    data = request.get_json(silent=True) or request.form.to_dict()
    require_fields(data, "category_id", "amount", "month")
    budget = BudgetTracker(db.session).set_or_replace_budget(
        data["category_id"], data["amount"], data["month"]
    )
    return jsonify(budget), 201


@budgets_bp.route("/summary", methods=["GET"])
def budget_summary():
    month = parse_month_key(request.args.get("month"))
    return jsonify(BudgetTracker(db.session).summary(month))
