"""
Bulk-plan value objects and result types.

This module defines immutable data structures for season boundaries, weekly
slots, plan allocations and usage history, plus the structured results the
scheduling functions return. Nothing here is persisted by the engine.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Optional

from ..utils.time import to_date


class RequestStatus(str, Enum):
    """Pump-out request statuses as stored by the portal."""
    REQUESTED = "Requested"
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELED = "Canceled"
    WAITLISTED = "Waitlisted"


class PlanStatus(str, Enum):
    """Derived status of a bulk plan within its season."""
    ACTIVE = "active"
    DEPLETED = "depleted"
    EXPIRED = "expired"
    INACTIVE = "inactive"


class RejectionReason(str, Enum):
    """Why a purchase or booking attempt was refused."""
    PURCHASE_AFTER_CUTOFF = "purchase_after_cutoff"
    EXCEEDS_AVAILABLE_WEEKS = "exceeds_available_weeks"
    PLAN_EXPIRED = "plan_expired"
    WEEK_ALREADY_BOOKED = "week_already_booked"
    NO_CREDITS_REMAINING = "no_credits_remaining"
    OUTSIDE_PLAN_SEASON = "outside_plan_season"


@dataclass(frozen=True)
class SeasonWindow:
    """A bulk-plan season: January 1 through the October 31 cutoff."""

    year: int
    cutoff_date: date

    @property
    def start_date(self) -> date:
        return date(self.year, 1, 1)

    def contains(self, day: date) -> bool:
        """Check if a day falls inside the season, both ends inclusive."""
        return self.start_date <= to_date(day) <= self.cutoff_date


@dataclass(frozen=True)
class WeeklySlot:
    """One calendar week, identified by its Monday."""

    monday: date

    @classmethod
    def for_date(cls, day: date) -> "WeeklySlot":
        day = to_date(day)
        return cls(monday=day - timedelta(days=day.weekday()))

    @property
    def sunday(self) -> date:
        return self.monday + timedelta(days=6)

    def contains(self, day: date) -> bool:
        return self.monday <= to_date(day) <= self.sunday


@dataclass(frozen=True)
class BulkPlanAllocation:
    """Credits granted by a bulk plan purchase."""

    purchase_date: date
    base_pump_outs: int
    additional_pump_outs: int
    season_end_date: date

    @property
    def total_pump_outs(self) -> int:
        return self.base_pump_outs + self.additional_pump_outs

    @property
    def year(self) -> int:
        return self.season_end_date.year


@dataclass(frozen=True)
class UsageRecord:
    """A prior pump-out request and its status."""

    request_date: date
    status: RequestStatus = RequestStatus.REQUESTED

    @property
    def is_active(self) -> bool:
        """Canceled requests never count against a plan."""
        return self.status != RequestStatus.CANCELED


@dataclass(frozen=True)
class PurchaseWindow:
    """How many extra credits can be bought on a given purchase date."""

    total_available_weeks: int
    max_additional_pump_outs: int
    season_end_date: date
    is_valid_purchase_date: bool
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class PurchaseCheck:
    """Result of checking a requested number of additional credits."""

    is_valid: bool
    window: PurchaseWindow
    requested_additional: int
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class RequestValidation:
    """Week-conflict and expiry verdict for a booking attempt."""

    is_valid: bool
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class UsageSummary:
    """Consumption snapshot of an allocation as of a given day."""

    total_pump_outs: int
    used_pump_outs: int
    remaining_pump_outs: int
    usage_percent: float
    status: PlanStatus
    booked_weeks: tuple[date, ...] = field(default_factory=tuple)
    open_weeks: int = 0
