"""Date parsing and reporting period utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ledgerbook.domain.entities import DateRange

DEFAULT_PERIOD = "current-month"

PERIOD_TOKENS = (
    "current-month",
    "last-month",
    "current-quarter",
    "current-year",
    "last-year",
    "all",
)


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and the
    relative words "today" and "yesterday".

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def _month_bounds(day: date) -> tuple[date, date]:
    start = day.replace(day=1)
    return start, start + relativedelta(months=1) - timedelta(days=1)


def _year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def resolve_period(period: Optional[str], today: Optional[date] = None) -> DateRange:
    """Map a symbolic period token to inclusive calendar-day bounds.

    Recognized tokens: current-month, last-month, current-quarter,
    current-year, last-year and all (unbounded). Tokens match exactly, so
    "All" or " all" are unknown. Anything unknown, including None, resolves
    to the current month. Never raises.

    Args:
        period: Period token
        today: Reference day; sampled once from the clock when omitted

    Returns:
        DateRange for the period
    """
    if today is None:
        today = date.today()
    if period == "all":
        return DateRange(None, None)

    if period == "last-month":
        start, end = _month_bounds(today.replace(day=1) - relativedelta(months=1))
    elif period == "current-quarter":
        first_month = 3 * ((today.month - 1) // 3) + 1
        start = date(today.year, first_month, 1)
        end = start + relativedelta(months=3) - timedelta(days=1)
    elif period == "current-year":
        start, end = _year_bounds(today.year)
    elif period == "last-year":
        start, end = _year_bounds(today.year - 1)
    else:
        start, end = _month_bounds(today)

    return DateRange(start, end)
