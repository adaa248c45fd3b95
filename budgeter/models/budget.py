from ..extensions import db


class Budget(db.Model):
    __tablename__ = "budgets"
    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    month = db.Column(db.String(7), nullable=False, index=True)  # YYYY-MM

    __table_args__ = (
        db.UniqueConstraint("category_id", "month", name="uq_budget_category_month"),
    )
