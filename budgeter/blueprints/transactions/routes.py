from flask import Blueprint, jsonify, request
from ...extensions import db
from ...models.transaction import TRANSACTION_TYPES
from ...services import Ledger
from ...validators import parse_choice, parse_int, parse_optional_date

transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")


@transactions_bp.route("", methods=["GET"])
def list_transactions():
    args = request.args
    category_id = args.get("category_id")
    txn_type = args.get("type")
    transactions = Ledger(db.session).list(
        start_date=parse_optional_date(args.get("startDate"), "startDate"),
        end_date=parse_optional_date(args.get("endDate"), "endDate"),
        category_id=parse_int(category_id, "category_id") if category_id else None,
        type=parse_choice(txn_type, TRANSACTION_TYPES, "type") if txn_type else None,
    )
    return jsonify(transactions)


@transactions_bp.route("", methods=["POST"])
def create_transaction():
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(Ledger(db.session).create(data)), 201


@transactions_bp.route("/<int:txn_id>", methods=["PUT"])
def update_transaction(txn_id):
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(Ledger(db.session).update(txn_id, data))


@transactions_bp.route("/<int:txn_id>", methods=["DELETE"])
def delete_transaction(txn_id):
    Ledger(db.session).delete(txn_id)
    return "", 204
