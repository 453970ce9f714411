"""
Bulk-plan allocation rules.

Works out how many credits a bulk plan may carry when bought on a given
date, prices the purchase, and builds the allocation the caller persists.
A subscriber can never hold more credits than there are weekly slots left
before the season cutoff.
"""

from datetime import date

from ..utils.time import to_date
from .calendar import count_mondays_between, season_cutoff
from .messages import purchase_window_message, rejection_message
from .models import BulkPlanAllocation, PurchaseCheck, PurchaseWindow, RejectionReason


def max_additional_pump_outs(purchase_date: date, base_pump_outs: int) -> PurchaseWindow:
    """
    Compute the ceiling on additional credits for a purchase date.

    Args:
        purchase_date: Day the plan is bought
        base_pump_outs: Credits included in the plan's base price

    Returns:
        PurchaseWindow with the available weeks and purchasable extras
    """
    purchase_date = to_date(purchase_date)
    season_end_date = season_cutoff(purchase_date.year)

    if purchase_date > season_end_date:
        reason = RejectionReason.PURCHASE_AFTER_CUTOFF
        return PurchaseWindow(
            total_available_weeks=0,
            max_additional_pump_outs=0,
            season_end_date=season_end_date,
            is_valid_purchase_date=False,
            reason=reason,
            message=rejection_message(reason, season_end_date),
        )

    total_available_weeks = count_mondays_between(purchase_date, season_end_date)
    max_additional = max(0, total_available_weeks - base_pump_outs)

    return PurchaseWindow(
        total_available_weeks=total_available_weeks,
        max_additional_pump_outs=max_additional,
        season_end_date=season_end_date,
        is_valid_purchase_date=True,
        message=purchase_window_message(total_available_weeks, max_additional, season_end_date),
    )


def calculate_bulk_plan_cost(base_price_cents: int, price_per_additional_cents: int,
                             additional_count: int) -> int:
    """
    Total price of a bulk plan in cents.

    ``additional_count`` is not clamped here; callers must keep it within the
    ceiling reported by max_additional_pump_outs before pricing.
    """
    return base_price_cents + price_per_additional_cents * additional_count


def check_additional_purchase(purchase_date: date, base_pump_outs: int,
                              additional_pump_outs: int) -> PurchaseCheck:
    """
    Check a requested number of extra credits against the purchase window.

    Args:
        purchase_date: Day the plan is bought
        base_pump_outs: Credits included in the plan's base price
        additional_pump_outs: Extra credits the subscriber asked for

    Returns:
        PurchaseCheck, invalid if the date is past the cutoff or the
        request exceeds the remaining weeks
    """
    window = max_additional_pump_outs(purchase_date, base_pump_outs)

    if not window.is_valid_purchase_date:
        return PurchaseCheck(
            is_valid=False,
            window=window,
            requested_additional=additional_pump_outs,
            reason=window.reason,
            message=window.message,
        )

    if additional_pump_outs > window.max_additional_pump_outs:
        reason = RejectionReason.EXCEEDS_AVAILABLE_WEEKS
        return PurchaseCheck(
            is_valid=False,
            window=window,
            requested_additional=additional_pump_outs,
            reason=reason,
            message=rejection_message(
                reason,
                window.season_end_date,
                max_additional=window.max_additional_pump_outs,
                requested=additional_pump_outs,
            ),
        )

    return PurchaseCheck(
        is_valid=True,
        window=window,
        requested_additional=additional_pump_outs,
        message=window.message,
    )


def allocate_bulk_plan(purchase_date: date, base_pump_outs: int,
                       additional_pump_outs: int = 0) -> BulkPlanAllocation:
    """Build the allocation for a purchase already checked by the caller."""
    purchase_date = to_date(purchase_date)
    return BulkPlanAllocation(
        purchase_date=purchase_date,
        base_pump_outs=base_pump_outs,
        additional_pump_outs=additional_pump_outs,
        season_end_date=season_cutoff(purchase_date.year),
    )
