import logging

from sqlalchemy import func

from ..dates import month_bounds
from ..models import Budget, Category, Transaction
from ..serializers import budget_to_dict, category_to_dict
from ..validators import parse_int, parse_month_key, parse_non_negative_amount
from .categories import CategoryDirectory

logger = logging.getLogger(__name__)


def budget_summary(category, budget_amount, spent):
    return {
        "category": category_to_dict(category),
        "budget_amount": budget_amount,
        "spent": spent,
        "remaining": budget_amount - spent,
        "percentage": (spent / budget_amount) * 100 if budget_amount > 0 else 0,
    }


class BudgetTracker:
    """Monthly per-category budgets and their spend summaries."""

    def __init__(self, session):
        self.session = session
        self.categories = CategoryDirectory(session)

    def by_month(self, month):
        parse_month_key(month)
        rows = (
            self.session.query(Budget, Category)
            .outerjoin(Category, Budget.category_id == Category.id)
            .filter(Budget.month == month)
            .order_by(Budget.id)
            .all()
        )
        return [budget_to_dict(b, c) for b, c in rows]

    def set_or_replace_budget(self, category_id, amount, month):
        category_id = parse_int(category_id, "category_id")
        amount = parse_non_negative_amount(amount)
        month = parse_month_key(month)
        category = self.categories.get(category_id)

        budget = self.session.query(Budget).filter_by(category_id=category_id, month=month).first()
        if budget:
            budget.amount = amount
        else:
            budget = Budget(category_id=category_id, month=month, amount=amount)
            self.session.add(budget)
        self.session.commit()
        logger.info("Budget for %s in %s set to %.2f", category.name, month, amount)
        return budget_to_dict(budget, category)

    def spent_by_category(self, month):
        start, end = month_bounds(month)
        rows = (
            self.session.query(Transaction.category_id, func.coalesce(func.sum(Transaction.amount), 0.0))
            .filter(
                Transaction.type == "expense",
                Transaction.date >= start,
                Transaction.date <= end,
            )
            .group_by(Transaction.category_id)
            .all()
        )
        return {category_id: float(total) for category_id, total in rows}

    def summary(self, month):
        parse_month_key(month)
        spent_map = self.spent_by_category(month)
        budget_map = {b.category_id: b.amount for b in self.session.query(Budget).filter_by(month=month)}

        rows = []
        for category in self.session.query(Category).filter_by(type="expense").order_by(Category.id):
            budget_amount = float(budget_map.get(category.id, 0.0))
            spent = spent_map.get(category.id, 0.0)
            # Categories with neither a budget nor any spending are left out.
            if budget_amount > 0 or spent > 0:
                rows.append(budget_summary(category, budget_amount, spent))
        logger.debug("Budget summary for %s: %d categories", month, len(rows))
        return rows
