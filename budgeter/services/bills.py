import logging
from datetime import date, timedelta

from ..errors import NotFound, ValidationError
from ..models import Category, RecurringBill
from ..models.recurring_bill import FREQUENCIES
from ..serializers import bill_to_dict
from ..validators import (
    parse_amount,
    parse_bool,
    parse_choice,
    parse_date,
    parse_int,
    require_fields,
)
from ..dates import next_due_date
from .categories import CategoryDirectory
from .payments import PaymentRegister

logger = logging.getLogger(__name__)


def parse_due_day(value):
    day = parse_int(value, "due_day")
    if not 1 <= day <= 31:
        raise ValidationError("due_day must be between 1 and 31")
    return day


class RecurringBillEngine:
    def __init__(self, session, clock=date.today):
        self.session = session
        self.clock = clock
        self.categories = CategoryDirectory(session)
        self.payments = PaymentRegister(session)

    def _joined(self):
        return self.session.query(RecurringBill, Category).outerjoin(
            Category, RecurringBill.category_id == Category.id
        )

    def _to_dict(self, bill, category, today):
        return bill_to_dict(bill, category, next_due_date(bill.due_day, bill.frequency, today))

    def _get_model(self, bill_id):
        bill = self.session.get(RecurringBill, bill_id)
        if bill is None:
            raise NotFound("Bill not found")
        return bill

    def get(self, bill_id):
        row = self._joined().filter(RecurringBill.id == bill_id).first()
        if row is None:
            raise NotFound("Bill not found")
        return self._to_dict(*row, self.clock())

    def list_all(self):
        today = self.clock()
        rows = self._joined().order_by(RecurringBill.due_day, RecurringBill.id).all()
        return [self._to_dict(b, c, today) for b, c in rows]

    def create(self, data):
        require_fields(data, "name", "amount", "category_id", "frequency", "due_day")
        category_id = parse_int(data["category_id"], "category_id")
        bill = RecurringBill(
            name=data["name"],
            amount=parse_amount(data["amount"]),
            category_id=category_id,
            frequency=parse_choice(data["frequency"], FREQUENCIES, "frequency"),
            due_day=parse_due_day(data["due_day"]),
            is_active=parse_bool(data.get("is_active", True), "is_active"),
        )
        self.categories.ensure_exists(category_id)
        self.session.add(bill)
        self.session.commit()
        logger.info("Created %s bill %r due on day %d", bill.frequency, bill.name, bill.due_day)
        return self.get(bill.id)

    def update(self, bill_id, data):
        bill = self._get_model(bill_id)
        changes = {}
        if data.get("name") is not None:
            changes["name"] = data["name"]
        if data.get("amount") is not None:
            changes["amount"] = parse_amount(data["amount"])
        if data.get("category_id") is not None:
            changes["category_id"] = parse_int(data["category_id"], "category_id")
            self.categories.ensure_exists(changes["category_id"])
        if data.get("frequency") is not None:
            changes["frequency"] = parse_choice(data["frequency"], FREQUENCIES, "frequency")
        if data.get("due_day") is not None:
            changes["due_day"] = parse_due_day(data["due_day"])
        if data.get("is_active") is not None:
            changes["is_active"] = parse_bool(data["is_active"], "is_active")
        for field, value in changes.items():
            setattr(bill, field, value)
        self.session.commit()
        return self.get(bill_id)

    def delete(self, bill_id):
        # Payments keep their recurring_bill_id; the join renders it as null.
        bill = self._get_model(bill_id)
        self.session.delete(bill)
        self.session.commit()
        logger.info("Deleted bill %s", bill_id)

    def upcoming(self, days=7):
        today = self.clock()
        horizon = today + timedelta(days=days)
        rows = (
            self._joined()
            .filter(RecurringBill.is_active.is_(True))
            .order_by(RecurringBill.due_day, RecurringBill.id)
            .all()
        )
        upcoming = []
        for bill, category in rows:
            due = next_due_date(bill.due_day, bill.frequency, today)
            if today <= due <= horizon:
                upcoming.append(bill_to_dict(bill, category, due))
        return upcoming

    def pay(self, bill_id, amount, paid_date):
        bill = self._get_model(bill_id)
        require_fields({"amount": amount, "paid_date": paid_date}, "amount", "paid_date")
        return self.payments.record(
            recurring_bill_id=bill.id,
            amount=parse_amount(amount),
            paid_date=parse_date(paid_date, "paid_date"),
            due_date=next_due_date(bill.due_day, bill.frequency, self.clock()),
            status="paid",
        )
