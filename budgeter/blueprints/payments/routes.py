from flask import Blueprint, jsonify, request
from ...extensions import db
from ...services import PaymentRegister
from ...validators import parse_optional_date

payments_bp = Blueprint("payments", __name__, url_prefix="/api/payments")


@payments_bp.route("", methods=["GET"])
def list_payments():
    payments = PaymentRegister(db.session).list(
        start_date=parse_optional_date(request.args.get("startDate"), "startDate"),
        end_date=parse_optional_date(request.args.get("endDate"), "endDate"),
    )
    return jsonify(payments)


@payments_bp.route("", methods=["POST"])
def create_payment():
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(PaymentRegister(db.session).create(data)), 201


@payments_bp.route("/<int:payment_id>", methods=["PUT"])
def update_payment(payment_id):
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(PaymentRegister(db.session).update(payment_id, data))
