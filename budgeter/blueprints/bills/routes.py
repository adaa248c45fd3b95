from flask import Blueprint, current_app, jsonify, request
from ...extensions import db
from ...services import RecurringBillEngine
from ...validators import parse_int_in_range

MAX_UPCOMING_DAYS = 3660

bills_bp = Blueprint("bills", __name__, url_prefix="/api/bills")


@bills_bp.route("", methods=["GET"])
def list_bills():
    return jsonify(RecurringBillEngine(db.session).list_all())


@bills_bp.route("", methods=["POST"])
def create_bill():
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(RecurringBillEngine(db.session).create(data)), 201


@bills_bp.route("/upcoming", methods=["GET"])
def upcoming_bills():
    days = request.args.get("days")
    if days:
        days = parse_int_in_range(days, "days", 0, MAX_UPCOMING_DAYS)
    else:
        days = current_app.config["UPCOMING_BILLS_DAYS"]
    return jsonify(RecurringBillEngine(db.session).upcoming(days))


@bills_bp.route("/<int:bill_id>", methods=["PUT"])
def update_bill(bill_id):
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(RecurringBillEngine(db.session).update(bill_id, data))


@bills_bp.route("/<int:bill_id>", methods=["DELETE"])
def delete_bill(bill_id):
    RecurringBillEngine(db.session).delete(bill_id)
    return "", 204


@bills_bp.route("/<int:bill_id>/pay", methods=["POST"])
def pay_bill(bill_id):
    data = request.get_json(silent=True) or request.form.to_dict()
    payment = RecurringBillEngine(db.session).pay(bill_id, data.get("amount"), data.get("paid_date"))
    return jsonify(payment), 201
