from ..extensions import db

DEFAULT_COLOR = "#2196f3"
CATEGORY_TYPES = ("income", "expense")


class Category(db.Model):
    __tablename__ = "categories"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(10), nullable=False)  # income/expense
    color = db.Column(db.String(20), nullable=False, default=DEFAULT_COLOR)

    __table_args__ = (
        db.CheckConstraint("type IN ('income', 'expense')", name="ck_category_type"),
    )
