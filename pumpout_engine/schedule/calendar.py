"""
Season and week calculus.

Maps calendar dates to season boundaries and Monday-identified weekly slots.
Weeks start on Monday. Values that are ``datetime`` instances are reduced to
their calendar date before any comparison.
"""

from datetime import date, timedelta

from ..utils.time import to_date
from .models import SeasonWindow

SEASON_CUTOFF_MONTH = 10
SEASON_CUTOFF_DAY = 31

ONE_WEEK = timedelta(days=7)


def season_cutoff(year: int) -> date:
    """Return the last day a bulk plan can be used in ``year``."""
    return date(year, SEASON_CUTOFF_MONTH, SEASON_CUTOFF_DAY)


def season_window(year: int) -> SeasonWindow:
    return SeasonWindow(year=year, cutoff_date=season_cutoff(year))


def monday_of(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    day = to_date(day)
    return day - timedelta(days=day.weekday())


def is_same_week(first: date, second: date) -> bool:
    return monday_of(first) == monday_of(second)


def enumerate_mondays(start_date: date, end_date: date) -> list[date]:
    """
    List every Monday between two dates, both inclusive.

    A start date in the middle of a week does not earn that week: the first
    Monday returned is the next one on or after ``start_date``.

    Args:
        start_date: First day of the range
        end_date: Last day of the range

    Returns:
        Ascending list of Mondays, empty when start_date is after end_date
    """
    start_date = to_date(start_date)
    end_date = to_date(end_date)

    if start_date > end_date:
        return []

    current = monday_of(start_date)
    if current < start_date:
        current += ONE_WEEK

    mondays = []
    while current <= end_date:
        mondays.append(current)
        current += ONE_WEEK

    return mondays


def count_mondays_between(start_date: date, end_date: date) -> int:
    return len(enumerate_mondays(start_date, end_date))


def available_mondays(start_date: date) -> list[date]:
    """List the Mondays left from ``start_date`` to that year's cutoff."""
    start_date = to_date(start_date)
    return enumerate_mondays(start_date, season_cutoff(start_date.year))
