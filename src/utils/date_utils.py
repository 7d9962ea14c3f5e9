"""Calendar helpers for month windows and ISO date parsing."""

import calendar
from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize a date-like value to a calendar date.

    Args:
        value: A date, a datetime, or an ISO ``YYYY-MM-DD`` string,
            optionally followed by a ``T`` time part.

    Returns:
        date: The calendar date, without time-of-day.

    Raises:
        ValueError: If the value is not a date or a parseable ISO string.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_iso_date(value.strip())
    raise ValueError(f"Not a calendar date: {value!r}")


def month_bounds(as_of: date) -> tuple[date, date]:
    """Return the first and last calendar day of the month of ``as_of``."""
    last_day = calendar.monthrange(as_of.year, as_of.month)[1]
    return (
        date(as_of.year, as_of.month, 1),
        date(as_of.year, as_of.month, last_day),
    )


def _parse_iso_date(text: str) -> date:
    """Parse the whole string; trailing text is never ignored."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        if "T" not in text:
            raise
    return datetime.fromisoformat(text).date()


__all__ = ["coerce_date", "month_bounds"]
