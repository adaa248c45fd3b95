"""Request field parsing; every helper raises ValidationError."""
from datetime import date

from .errors import ValidationError
from .dates import parse_month


def _missing(value):
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data, *names):
    missing = [n for n in names if _missing(data.get(n))]
    if missing:
        raise ValidationError(f"{', '.join(missing)} {'is' if len(missing) == 1 else 'are'} required")


def parse_amount(value, field="amount"):
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}")
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return amount


def parse_non_negative_amount(value, field="amount"):
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}")
    if amount < 0:
        raise ValidationError(f"{field} must not be negative")
    return amount


def parse_int(value, field):
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}")


def parse_date(value, field="date"):
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}, expected YYYY-MM-DD")


def parse_optional_date(value, field):
    return None if _missing(value) else parse_date(value, field)


def parse_month_key(value, field="month"):
    if _missing(value):
        raise ValidationError(f"{field} is required")
    try:
        parse_month(value)
    except ValueError:
        raise ValidationError(f"Invalid {field}, expected YYYY-MM")
    return value


def parse_choice(value, choices, field):
    if value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)}")
    return value


def parse_bool(value, field):
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.lower() in ("true", "false", "1", "0"):
        return value.lower() in ("true", "1")
    raise ValidationError(f"Invalid {field}")


def parse_int_in_range(value, field, low, high):
    number = parse_int(value, field)
    if not low <= number <= high:
        raise ValidationError(f"{field} must be between {low} and {high}")
    return number
