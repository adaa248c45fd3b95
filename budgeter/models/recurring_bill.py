from ..extensions import db

FREQUENCIES = ("monthly", "quarterly", "yearly")


class RecurringBill(db.Model):
    __tablename__ = "recurring_bills"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False)
    frequency = db.Column(db.String(10), nullable=False)
    due_day = db.Column(db.Integer, nullable=False)  # 1..31, clamped to month length on read
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    __table_args__ = (
        db.CheckConstraint("frequency IN ('monthly', 'quarterly', 'yearly')", name="ck_bill_frequency"),
        db.CheckConstraint("due_day >= 1 AND due_day <= 31", name="ck_bill_due_day"),
    )
