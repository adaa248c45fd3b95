import csv
import logging
from datetime import date
from io import StringIO

from sqlalchemy import func

from ..models import Category, Transaction
from ..dates import month_bounds, trailing_months
from ..serializers import category_to_dict
from .ledger import Ledger
from .payments import PaymentRegister

logger = logging.getLogger(__name__)

EXPORT_HEADER = ["Date", "Type", "Category", "Description", "Amount"]


class ReportAggregator:
    def __init__(self, session, clock=date.today):
        self.session = session
        self.clock = clock
        self.ledger = Ledger(session)
        self.payments = PaymentRegister(session)

    def spending_by_category(self, start_date, end_date):
        total = func.sum(Transaction.amount)
        rows = (
            self.session.query(Category, total.label("total"))
            .join(Transaction, Transaction.category_id == Category.id)
            .filter(
                Category.type == "expense",
                Transaction.type == "expense",
                Transaction.date >= start_date,
                Transaction.date <= end_date,
            )
            .group_by(Category.id)
            .having(total > 0)
            .order_by(total.desc(), Category.id)
            .all()
        )
        grand_total = sum(float(t) for _, t in rows)
        return [
            {
                "category": category_to_dict(category),
                "total": float(t),
                "percentage": (float(t) / grand_total) * 100 if grand_total > 0 else 0,
            }
            for category, t in rows
        ]

    def monthly_trends(self, months):
        trends = []
        for key in trailing_months(months, self.clock()):
            start, end = month_bounds(key)
            income = self.ledger.sum_by_type_in_range("income", start, end)
            expenses = self.ledger.sum_by_type_in_range("expense", start, end)
            trends.append({
                "month": key,
                "income": income,
                "expenses": expenses,
                "savings": income - expenses,
            })
        return trends

    def bill_payments(self):
        return self.payments.list()

    def export_csv(self):
        output = StringIO()
        writer = csv.writer(output)
        writer.writerow(EXPORT_HEADER)
        for txn in self.ledger.list():
            category = txn["category"]["name"] if txn["category"] else ""
            writer.writerow([txn["date"], txn["type"], category, txn["description"], f"{txn['amount']:.2f}"])
        logger.debug("Exported ledger as CSV")
        return output.getvalue()
