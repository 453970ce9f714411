"""
User-facing messages for scheduling results.

Calculation functions decide *what* happened and record it as a
RejectionReason; this module turns those decisions into the text shown to
boat owners. Keeping the wording here lets tests assert on structured
fields without matching prose.
"""

from datetime import date
from typing import Any

from ..utils.time import format_month_day
from .models import RejectionReason

REJECTION_TEMPLATES: dict[RejectionReason, str] = {
    RejectionReason.PURCHASE_AFTER_CUTOFF: (
        "Bulk plans cannot be purchased after {cutoff}. Please wait until next season."
    ),
    RejectionReason.EXCEEDS_AVAILABLE_WEEKS: (
        "Only {max_additional} additional pump-outs can be added before {cutoff}; "
        "{requested} were requested."
    ),
    RejectionReason.PLAN_EXPIRED: (
        "Your bulk plan has expired. Please purchase a new plan for next season."
    ),
    RejectionReason.WEEK_ALREADY_BOOKED: (
        "You already have a pump-out request for this week. "
        "Bulk plans allow only one service per week."
    ),
    RejectionReason.NO_CREDITS_REMAINING: (
        "You have used all {total} pump-outs included in your bulk plan for this season."
    ),
    RejectionReason.OUTSIDE_PLAN_SEASON: (
        "Your bulk plan only covers pump-outs in the {year} season, through {cutoff}."
    ),
}


def rejection_message(reason: RejectionReason, season_end_date: date, **details: Any) -> str:
    """
    Render the message for a rejection.

    Args:
        reason: Why the attempt was rejected
        season_end_date: Cutoff of the season involved
        **details: Values referenced by the reason's template

    Returns:
        Message suitable for showing to the user verbatim
    """
    return REJECTION_TEMPLATES[reason].format(cutoff=format_month_day(season_end_date), **details)


def purchase_window_message(total_available_weeks: int, max_additional: int,
                            season_end_date: date) -> str:
    """Describe an open purchase window."""
    if max_additional == 0:
        return (f"Your base plan covers all {total_available_weeks} available weeks "
                f"until {format_month_day(season_end_date)}.")
    return f"You can purchase up to {max_additional} additional pump-outs for the remaining weeks."
