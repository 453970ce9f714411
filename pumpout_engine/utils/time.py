"""
Date handling utilities for the scheduling engine.

Request histories arrive from the booking store as a mix of plain dates and
timestamps. Everything in the engine compares calendar dates, so timestamps
are reduced to their date before use. The engine never reads the wall clock;
callers pass "today" explicitly.
"""

from datetime import date, datetime


def to_date(value: date) -> date:
    """
    Reduce a datetime to its calendar date.

    Args:
        value: A date or datetime

    Returns:
        The calendar date, unchanged if already a plain date
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day of the month."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_month_day(value: date) -> str:
    """
    Format a date as month name plus ordinal day, e.g. "October 31st".

    Args:
        value: Date to format

    Returns:
        Human-readable month and day
    """
    value = to_date(value)
    return f"{value.strftime('%B')} {value.day}{ordinal_suffix(value.day)}"


def format_iso_date(value: date) -> str:
    """Format a date for logging."""
    return to_date(value).isoformat()
