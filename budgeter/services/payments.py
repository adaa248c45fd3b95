import logging

from ..errors import NotFound
from ..models import BillPayment, RecurringBill
from ..models.bill_payment import PAYMENT_STATUSES
from ..serializers import payment_to_dict
from ..validators import parse_amount, parse_choice, parse_date, parse_int, require_fields

logger = logging.getLogger(__name__)


class PaymentRegister:
    def __init__(self, session):
        self.session = session

    def _joined(self):
        return self.session.query(BillPayment, RecurringBill).outerjoin(
            RecurringBill, BillPayment.recurring_bill_id == RecurringBill.id
        )

    def get(self, payment_id):
        row = self._joined().filter(BillPayment.id == payment_id).first()
        if row is None:
            raise NotFound("Payment not found")
        return payment_to_dict(*row)

    def list(self, start_date=None, end_date=None):
        query = self._joined()
        if start_date:
            query = query.filter(BillPayment.paid_date >= start_date)
        if end_date:
            query = query.filter(BillPayment.paid_date <= end_date)
        rows = query.order_by(BillPayment.paid_date.desc(), BillPayment.id.desc()).all()
        return [payment_to_dict(p, b) for p, b in rows]

    def record(self, recurring_bill_id, amount, paid_date, due_date, status="paid"):
        payment = BillPayment(
            recurring_bill_id=recurring_bill_id,
            amount=amount,
            paid_date=paid_date,
            due_date=due_date,
            status=status,
        )
        self.session.add(payment)
        self.session.commit()
        logger.info("Recorded %s payment of %.2f for bill %s", status, amount, recurring_bill_id)
        return self.get(payment.id)

    def _bill_id(self, value):
        if not value:
            return None
        bill_id = parse_int(value, "recurring_bill_id")
        if self.session.get(RecurringBill, bill_id) is None:
            raise NotFound("Bill not found")
        return bill_id

    def create(self, data):
        require_fields(data, "amount", "paid_date", "due_date")
        return self.record(
            recurring_bill_id=self._bill_id(data.get("recurring_bill_id")),
            amount=parse_amount(data["amount"]),
            paid_date=parse_date(data["paid_date"], "paid_date"),
            due_date=parse_date(data["due_date"], "due_date"),
            status=parse_choice(data.get("status") or "paid", PAYMENT_STATUSES, "status"),
        )

    def update(self, payment_id, data):
        payment = self.session.get(BillPayment, payment_id)
        if payment is None:
            raise NotFound("Payment not found")
        changes = {}
        if "recurring_bill_id" in data:
            changes["recurring_bill_id"] = self._bill_id(data["recurring_bill_id"])
        if data.get("amount") is not None:
            changes["amount"] = parse_amount(data["amount"])
        if data.get("paid_date") is not None:
            changes["paid_date"] = parse_date(data["paid_date"], "paid_date")
        if data.get("due_date") is not None:
            changes["due_date"] = parse_date(data["due_date"], "due_date")
        if data.get("status") is not None:
            changes["status"] = parse_choice(data["status"], PAYMENT_STATUSES, "status")
        for field, value in changes.items():
            setattr(payment, field, value)
        self.session.commit()
        return self.get(payment_id)
