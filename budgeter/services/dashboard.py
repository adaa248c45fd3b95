from datetime import date

from ..dates import month_key
from .bills import RecurringBillEngine
from .budgets import BudgetTracker
from .ledger import Ledger


class DashboardComposer:
    """Read-only summary of the current month."""

    def __init__(self, session, clock=date.today, upcoming_days=7, recent_limit=5):
        self.clock = clock
        self.upcoming_days = upcoming_days
        self.recent_limit = recent_limit
        self.ledger = Ledger(session)
        self.bills = RecurringBillEngine(session, clock=clock)
        self.budgets = BudgetTracker(session)

    def summary(self):
        month = month_key(self.clock())
        totals = self.ledger.monthly_totals(month)
        return {
            "total_income": totals["income"],
            "total_expenses": totals["expenses"],
            "savings": totals["income"] - totals["expenses"],
            "upcoming_bills": self.bills.upcoming(self.upcoming_days),
            "recent_transactions": self.ledger.recent(self.recent_limit),
            "budget_status": self.budgets.summary(month),
        }
