import logging

from sqlalchemy import func

from ..errors import NotFound
from ..models import Category, Transaction
from ..models.transaction import TRANSACTION_TYPES
from ..serializers import transaction_to_dict
from ..validators import parse_amount, parse_choice, parse_date, parse_int, require_fields
from ..dates import month_bounds
from .categories import CategoryDirectory

logger = logging.getLogger(__name__)


class Ledger:
    def __init__(self, session):
        self.session = session
        self.categories = CategoryDirectory(session)

    def _joined(self):
        return self.session.query(Transaction, Category).outerjoin(
            Category, Transaction.category_id == Category.id
        )

    def _newest_first(self, query):
        return query.order_by(Transaction.date.desc(), Transaction.id.desc())

    def get(self, txn_id):
        row = self._joined().filter(Transaction.id == txn_id).first()
        if row is None:
            raise NotFound("Transaction not found")
        return transaction_to_dict(*row)

    def list(self, start_date=None, end_date=None, category_id=None, type=None):
        query = self._joined()
        if start_date:
            query = query.filter(Transaction.date >= start_date)
        if end_date:
            query = query.filter(Transaction.date <= end_date)
        if category_id:
            query = query.filter(Transaction.category_id == category_id)
        if type:
            query = query.filter(Transaction.type == type)
        return [transaction_to_dict(t, c) for t, c in self._newest_first(query).all()]

    def recent(self, limit=10):
        rows = self._newest_first(self._joined()).limit(limit).all()
        return [transaction_to_dict(t, c) for t, c in rows]

    def create(self, data):
        require_fields(data, "amount", "description", "category_id", "date", "type")
        category_id = parse_int(data["category_id"], "category_id")
        txn = Transaction(
            amount=parse_amount(data["amount"]),
            description=data["description"],
            category_id=category_id,
            date=parse_date(data["date"]),
            type=parse_choice(data["type"], TRANSACTION_TYPES, "type"),
        )
        self.categories.ensure_exists(category_id)
        self.session.add(txn)
        self.session.commit()
        logger.info("Recorded %s of %.2f on %s", txn.type, txn.amount, txn.date)
        return self.get(txn.id)

    def update(self, txn_id, data):
        txn = self.session.get(Transaction, txn_id)
        if txn is None:
            raise NotFound("Transaction not found")
        # Parse everything before touching the row so a bad field changes nothing.
        changes = {}
        if data.get("amount") is not None:
            changes["amount"] = parse_amount(data["amount"])
        if data.get("description") is not None:
            changes["description"] = data["description"]
        if data.get("category_id") is not None:
            changes["category_id"] = parse_int(data["category_id"], "category_id")
            self.categories.ensure_exists(changes["category_id"])
        if data.get("date") is not None:
            changes["date"] = parse_date(data["date"])
        if data.get("type") is not None:
            changes["type"] = parse_choice(data["type"], TRANSACTION_TYPES, "type")
        for field, value in changes.items():
            setattr(txn, field, value)
        self.session.commit()
        return self.get(txn_id)

    def delete(self, txn_id):
        txn = self.session.get(Transaction, txn_id)
        if txn is None:
            raise NotFound("Transaction not found")
        self.session.delete(txn)
        self.session.commit()

    def sum_by_type_in_range(self, type, start_date, end_date):
        total = (
            self.session.query(func.coalesce(func.sum(Transaction.amount), 0.0))
            .filter(
                Transaction.type == type,
                Transaction.date >= start_date,
                Transaction.date <= end_date,
            )
            .scalar()
        )
        return float(total or 0.0)

    def monthly_totals(self, month):
        start, end = month_bounds(month)
        return {
            "income": self.sum_by_type_in_range("income", start, end),
            "expenses": self.sum_by_type_in_range("expense", start, end),
        }
