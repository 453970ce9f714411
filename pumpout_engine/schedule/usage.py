"""
Usage tracking and booking validation for bulk plans.

Two independent questions are answered over the same request history:
whether the requested week is still free, and how many credits remain.
Callers combine them; neither answer implies the other.
"""

from collections.abc import Iterable
from datetime import date
from typing import Union

from ..utils.time import to_date
from .calendar import enumerate_mondays, monday_of
from .messages import rejection_message
from .models import (
    BulkPlanAllocation,
    PlanStatus,
    RejectionReason,
    RequestStatus,
    RequestValidation,
    UsageRecord,
    UsageSummary,
    WeeklySlot,
)

RequestHistory = Iterable[Union[UsageRecord, date]]


def _as_record(entry: Union[UsageRecord, date]) -> UsageRecord:
    if isinstance(entry, UsageRecord):
        return UsageRecord(request_date=to_date(entry.request_date), status=entry.status)
    return UsageRecord(request_date=to_date(entry), status=RequestStatus.REQUESTED)


def active_request_dates(history: RequestHistory) -> list[date]:
    """Dates of every request in the history that was not canceled."""
    records = (_as_record(entry) for entry in history)
    return [record.request_date for record in records if record.is_active]


def count_used_pump_outs(history: RequestHistory, year: int) -> int:
    """
    Count the credits consumed in a season.

    Args:
        history: Prior requests, as UsageRecords or bare dates
        year: Season year of the allocation

    Returns:
        Number of non-canceled requests dated in ``year``
    """
    return sum(1 for day in active_request_dates(history) if day.year == year)


def remaining_pump_outs(total_pump_outs: int, used_pump_outs: int) -> int:
    return max(0, total_pump_outs - used_pump_outs)


def validate_bulk_plan_request(request_date: date, existing_requests: RequestHistory,
                               season_end_date: date) -> RequestValidation:
    """
    Check a booking attempt against the season cutoff and the weekly limit.

    Only one service is allowed per Monday-to-Sunday week. Canceled requests
    do not occupy their week. Remaining credits are not considered here.

    Args:
        request_date: Day the service is requested for
        existing_requests: Prior requests, as UsageRecords or bare dates
        season_end_date: Last day the plan can be used

    Returns:
        RequestValidation with the verdict and, when invalid, its reason
    """
    request_date = to_date(request_date)
    season_end_date = to_date(season_end_date)

    if request_date > season_end_date:
        reason = RejectionReason.PLAN_EXPIRED
        return RequestValidation(
            is_valid=False,
            reason=reason,
            message=rejection_message(reason, season_end_date),
        )

    requested_week = monday_of(request_date)
    if any(monday_of(day) == requested_week for day in active_request_dates(existing_requests)):
        reason = RejectionReason.WEEK_ALREADY_BOOKED
        return RequestValidation(
            is_valid=False,
            reason=reason,
            message=rejection_message(reason, season_end_date),
        )

    return RequestValidation(is_valid=True)


def derive_plan_status(allocation: BulkPlanAllocation, used_pump_outs: int,
                       today: date) -> PlanStatus:
    """
    Derive where an allocation stands in its season.

    Args:
        allocation: The subscriber's bulk plan allocation
        used_pump_outs: Credits consumed so far this season
        today: Current date, supplied by the caller

    Returns:
        INACTIVE for another year's plan, EXPIRED after the cutoff,
        DEPLETED with no credits left, ACTIVE otherwise
    """
    today = to_date(today)

    if allocation.year != today.year:
        return PlanStatus.INACTIVE
    if today > allocation.season_end_date:
        return PlanStatus.EXPIRED
    if remaining_pump_outs(allocation.total_pump_outs, used_pump_outs) == 0:
        return PlanStatus.DEPLETED
    return PlanStatus.ACTIVE


def booked_weeks(history: RequestHistory, year: int) -> tuple[date, ...]:
    """Mondays of the weeks already holding a non-canceled request in ``year``."""
    mondays = {monday_of(day) for day in active_request_dates(history) if day.year == year}
    return tuple(sorted(mondays))


def open_slots(allocation: BulkPlanAllocation, history: RequestHistory,
               today: date) -> list[WeeklySlot]:
    """
    List the weeks that can still be booked this season.

    Args:
        allocation: The subscriber's bulk plan allocation
        history: Prior requests, as UsageRecords or bare dates
        today: Current date, supplied by the caller

    Returns:
        WeeklySlots from the later of today and the purchase date up to the
        cutoff, without the weeks already booked
    """
    start = max(to_date(today), allocation.purchase_date)
    taken = set(booked_weeks(history, allocation.year))
    return [
        WeeklySlot(monday=monday)
        for monday in enumerate_mondays(start, allocation.season_end_date)
        if monday not in taken
    ]


def summarize_usage(allocation: BulkPlanAllocation, history: RequestHistory,
                    today: date) -> UsageSummary:
    """Build the consumption snapshot shown on the plan status panel."""
    # History may be a one-shot iterator
    history = list(history)
    used = count_used_pump_outs(history, allocation.year)
    total = allocation.total_pump_outs
    usage_percent = round(min(100.0, used / total * 100), 1) if total else 0.0

    return UsageSummary(
        total_pump_outs=total,
        used_pump_outs=used,
        remaining_pump_outs=remaining_pump_outs(total, used),
        usage_percent=usage_percent,
        status=derive_plan_status(allocation, used, today),
        booked_weeks=booked_weeks(history, allocation.year),
        open_weeks=len(open_slots(allocation, history, today)),
    )
