from .categories import CategoryDirectory
from .ledger import Ledger
from .payments import PaymentRegister
from .bills import RecurringBillEngine
from .budgets import BudgetTracker
from .reports import ReportAggregator
from .dashboard import DashboardComposer

__all__ = [
    "CategoryDirectory",
    "Ledger",
    "PaymentRegister",
    "RecurringBillEngine",
    "BudgetTracker",
    "ReportAggregator",
    "DashboardComposer",
]
