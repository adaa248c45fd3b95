from .category import Category
from .transaction import Transaction
from .recurring_bill import RecurringBill
from .bill_payment import BillPayment
from .budget import Budget

__all__ = ["Category", "Transaction", "RecurringBill", "BillPayment", "Budget"]
