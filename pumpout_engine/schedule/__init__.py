"""
Bulk-plan scheduling and credit allocation.

Pure functions over dates and counts: season boundaries, Monday-identified
weekly slots, the ceiling on purchasable credits, and booking validation.
"""
from .allocation import (
    allocate_bulk_plan,
    calculate_bulk_plan_cost,
    check_additional_purchase,
    max_additional_pump_outs,
)
from .calendar import (
    available_mondays,
    count_mondays_between,
    enumerate_mondays,
    is_same_week,
    monday_of,
    season_cutoff,
    season_window,
)
from .models import (
    BulkPlanAllocation,
    PlanStatus,
    PurchaseCheck,
    PurchaseWindow,
    RejectionReason,
    RequestStatus,
    RequestValidation,
    SeasonWindow,
    UsageRecord,
    UsageSummary,
    WeeklySlot,
)
from .usage import (
    count_used_pump_outs,
    derive_plan_status,
    open_slots,
    remaining_pump_outs,
    summarize_usage,
    validate_bulk_plan_request,
)

__all__ = [
    # Calendar
    "season_cutoff",
    "season_window",
    "monday_of",
    "is_same_week",
    "enumerate_mondays",
    "count_mondays_between",
    "available_mondays",
    # Allocation
    "max_additional_pump_outs",
    "calculate_bulk_plan_cost",
    "check_additional_purchase",
    "allocate_bulk_plan",
    # Usage
    "count_used_pump_outs",
    "remaining_pump_outs",
    "validate_bulk_plan_request",
    "derive_plan_status",
    "open_slots",
    "summarize_usage",
    # Models
    "BulkPlanAllocation",
    "PlanStatus",
    "PurchaseCheck",
    "PurchaseWindow",
    "RejectionReason",
    "RequestStatus",
    "RequestValidation",
    "SeasonWindow",
    "UsageRecord",
    "UsageSummary",
    "WeeklySlot",
]
