"""Timestamp formatting utilities."""

from datetime import date, datetime


def today() -> str:
    """Current local date as YYYY-MM-DD."""
    return date.today().isoformat()


def now_exact() -> str:
    """Current local time as an ISO 8601 string with microseconds."""
    return datetime.now().isoformat()


def format_date(value) -> str:
    """
    Format a date-like value as YYYY-MM-DD.

    Accepts a date/datetime, an ISO 8601 string, or None (meaning today).
    Unparseable strings are returned unchanged.

    Examples:
        format_date(date(2026, 10, 18))
        # "2026-10-18"

        format_date("2026-10-18T09:30:00")
        # "2026-10-18"
    """
    if value is None:
        return today()
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    try:
        return datetime.fromisoformat(str(value)).date().isoformat()
    except ValueError:
        return str(value)
