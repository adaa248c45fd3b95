"""Map flat model rows into the JSON shapes returned by the API.

Nested objects (a transaction's category, a payment's bill) are rebuilt
here from rows the services fetched with an outer join, so a dangling
reference simply serializes as ``None``.
"""


def _iso(value):
    return value.isoformat() if value is not None else None


def category_to_dict(category):
    if category is None:
        return None
    return {
        "id": category.id,
        "name": category.name,
        "type": category.type,
        "color": category.color,
    }


def transaction_to_dict(txn, category=None):
    return {
        "id": txn.id,
        "amount": txn.amount,
        "description": txn.description,
        "category_id": txn.category_id,
        "date": _iso(txn.date),
        "type": txn.type,
        "created_at": _iso(txn.created_at),
        "category": category_to_dict(category),
    }


def bill_to_dict(bill, category=None, next_due=None):
    return {
        "id": bill.id,
        "name": bill.name,
        "amount": bill.amount,
        "category_id": bill.category_id,
        "frequency": bill.frequency,
        "due_day": bill.due_day,
        "is_active": bool(bill.is_active),
        "category": category_to_dict(category),
        "next_due_date": _iso(next_due),
    }


def bill_summary_to_dict(bill):
    if bill is None:
        return None
    return {
        "id": bill.id,
        "name": bill.name,
        "amount": bill.amount,
        "frequency": bill.frequency,
        "due_day": bill.due_day,
    }


def payment_to_dict(payment, bill=None):
    return {
        "id": payment.id,
        "recurring_bill_id": payment.recurring_bill_id,
        "amount": payment.amount,
        "paid_date": _iso(payment.paid_date),
        "due_date": _iso(payment.due_date),
        "status": payment.status,
        "recurring_bill": bill_summary_to_dict(bill),
    }


def budget_to_dict(budget, category=None):
    return {
        "id": budget.id,
        "category_id": budget.category_id,
        "amount": budget.amount,
        "month": budget.month,
        "category": category_to_dict(category),
    }
