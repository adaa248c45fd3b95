from datetime import datetime
from ..extensions import db

TRANSACTION_TYPES = ("income", "expense")


class Transaction(db.Model):
    __tablename__ = "transactions"
    id = db.Column(db.Integer, primary_key=True)
    amount = db.Column(db.Float, nullable=False)
    description = db.Column(db.String(255), nullable=False)
    # Not cascaded: deleting a category leaves its transactions in place.
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, index=True)
    type = db.Column(db.String(10), nullable=False)  # independent of the category's type
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("type IN ('income', 'expense')", name="ck_transaction_type"),
    )
