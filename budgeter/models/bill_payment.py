from ..extensions import db

PAYMENT_STATUSES = ("paid", "pending", "overdue")


class BillPayment(db.Model):
    __tablename__ = "bill_payments"
    id = db.Column(db.Integer, primary_key=True)
    recurring_bill_id = db.Column(db.Integer, db.ForeignKey("recurring_bills.id"), nullable=True)
    amount = db.Column(db.Float, nullable=False)
    paid_date = db.Column(db.Date, nullable=False, index=True)
    due_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(10), nullable=False, default="paid")

    __table_args__ = (
        db.CheckConstraint("status IN ('paid', 'pending', 'overdue')", name="ck_payment_status"),
    )
