import calendar
from datetime import date

FREQUENCY_MONTHS = {
    "monthly": 1,
    "quarterly": 3,
    "yearly": 12,
}


def last_day_of_month(year, month):
    return calendar.monthrange(year, month)[1]


def shift_month(year, month, offset):
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def clamped_date(year, month, day):
    return date(year, month, min(day, last_day_of_month(year, month)))


def next_due_date(due_day, frequency, reference_date):
    """Next occurrence of a bill; due on the reference day itself still counts as this period."""
    if frequency not in FREQUENCY_MONTHS:
        raise ValueError(f"Unknown frequency: {frequency!r}")
    year, month = reference_date.year, reference_date.month
    if reference_date.day > due_day:
        year, month = shift_month(year, month, FREQUENCY_MONTHS[frequency])
    # Day 31 in a 30-day month falls on the 30th
    return clamped_date(year, month, due_day)


def parse_month(month):
    parts = month.split("-") if isinstance(month, str) else []
    if len(parts) != 2 or len(parts[0]) != 4 or len(parts[1]) != 2:
        raise ValueError(f"Invalid month key: {month!r}")
    year, mon = int(parts[0]), int(parts[1])
    if not 1 <= mon <= 12:
        raise ValueError(f"Invalid month key: {month!r}")
    return year, mon


def month_key(value):
    return value.strftime("%Y-%m")


def month_bounds(month):
    year, mon = parse_month(month)
    return date(year, mon, 1), date(year, mon, last_day_of_month(year, mon))


def trailing_months(count, today):
    # oldest first, ending with today's month
    keys = []
    for offset in range(count - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -offset)
        keys.append(f"{year:04d}-{month:02d}")
    return keys
