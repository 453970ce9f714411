"""
Bulk-plan engine coordinator.

Composes the pure scheduling functions for a booking handler: looks plans
up in the catalog, prices purchases, and evaluates booking attempts,
logging every decision. The week-conflict verdict and the credit count are
reported side by side so callers can word "week taken" differently from
"out of credits".
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .logging.config import (
    configure_logging,
    get_booking_logger,
    log_booking_decision,
    log_plan_status,
)
from .plans.catalog import PlanCatalog, ServicePlan
from .schedule.allocation import (
    allocate_bulk_plan,
    calculate_bulk_plan_cost,
    check_additional_purchase,
    max_additional_pump_outs,
)
from .schedule.messages import rejection_message
from .schedule.models import (
    BulkPlanAllocation,
    PlanStatus,
    PurchaseCheck,
    PurchaseWindow,
    RejectionReason,
    RequestValidation,
    UsageSummary,
)
from .schedule.usage import (
    RequestHistory,
    count_used_pump_outs,
    derive_plan_status,
    remaining_pump_outs,
    summarize_usage,
    validate_bulk_plan_request,
)
from .utils.time import format_iso_date, to_date

logger = structlog.get_logger(__name__)
booking_logger = get_booking_logger(__name__)


@dataclass(frozen=True)
class PurchaseQuote:
    """Priced purchase of a bulk plan with extra credits."""

    plan: ServicePlan
    check: PurchaseCheck
    total_cost_cents: Optional[int] = None
    allocation: Optional[BulkPlanAllocation] = None

    @property
    def is_valid(self) -> bool:
        return self.check.is_valid


@dataclass(frozen=True)
class BookingDecision:
    """Outcome of a booking attempt, with both signals kept apart."""

    week_check: RequestValidation
    used_pump_outs: int
    remaining_pump_outs: int
    status: PlanStatus
    in_season: bool = True
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None

    @property
    def has_credits(self) -> bool:
        return self.remaining_pump_outs > 0

    @property
    def is_bookable(self) -> bool:
        """Expired plans and requests outside the plan's season are never booked."""
        return self.in_season and self.status not in (PlanStatus.EXPIRED, PlanStatus.INACTIVE)

    @property
    def is_accepted(self) -> bool:
        return self.is_bookable and self.week_check.is_valid and self.has_credits


class BulkPlanEngine:
    """
    Entry point for booking handlers.

    Holds only the validated configuration and plan catalog; every call
    takes the dates and history it needs as arguments.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the engine.

        Args:
            config_dir: Directory holding plans.yaml, defaults to ./config
            overrides: Highest-precedence configuration values

        Raises:
            ConfigurationError: If settings or plan entries are invalid
        """
        self.logger = logger
        self.booking_logger = booking_logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config = self.config_loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(self.config)
        if errors:
            raise ConfigurationError(
                f"Invalid engine configuration: {len(errors)} error(s)",
                errors=errors,
                source=str(self.config_loader.catalog_file),
            )

        configure_logging(
            level=self.config["logging"]["level"],
            format_json=self.config["logging"]["format_json"],
        )

        self.catalog = PlanCatalog.from_entries(
            self.config_loader.load_plan_entries(),
            self.config["pricing"]["default_price_per_additional_cents"],
        )

        self.logger.info(
            "Bulk plan engine initialized",
            catalog_file=str(self.config_loader.catalog_file),
            plans=self.catalog.names(),
        )

    def purchase_window(self, plan_name: str, purchase_date: date) -> PurchaseWindow:
        """
        Report how many extra credits a plan can take on a purchase date.

        Raises:
            UnknownPlanError: If the plan is not in the catalog
        """
        plan = self.catalog.get(plan_name)
        window = max_additional_pump_outs(purchase_date, plan.base_quantity)

        log_booking_decision(
            self.booking_logger,
            check_name="purchase_window",
            passed=window.is_valid_purchase_date,
            subject=plan.name,
            reason=window.reason.value if window.reason else None,
            context={
                "purchase_date": format_iso_date(purchase_date),
                "total_available_weeks": window.total_available_weeks,
                "max_additional_pump_outs": window.max_additional_pump_outs,
            }
        )
        return window

    def quote_purchase(self, plan_name: str, purchase_date: date,
                       additional_pump_outs: int = 0) -> PurchaseQuote:
        """
        Price a bulk plan purchase after checking it against the season.

        Args:
            plan_name: Catalog name of the plan
            purchase_date: Day of purchase
            additional_pump_outs: Extra credits requested on top of the base

        Returns:
            PurchaseQuote; cost and allocation are None when the check fails

        Raises:
            UnknownPlanError: If the plan is not in the catalog
        """
        plan = self.catalog.get(plan_name)
        check = check_additional_purchase(purchase_date, plan.base_quantity, additional_pump_outs)

        log_booking_decision(
            self.booking_logger,
            check_name="additional_purchase",
            passed=check.is_valid,
            subject=plan.name,
            reason=check.reason.value if check.reason else None,
            context={
                "purchase_date": format_iso_date(purchase_date),
                "requested_additional": additional_pump_outs,
                "max_additional_pump_outs": check.window.max_additional_pump_outs,
            }
        )

        if not check.is_valid:
            return PurchaseQuote(plan=plan, check=check)

        return PurchaseQuote(
            plan=plan,
            check=check,
            total_cost_cents=calculate_bulk_plan_cost(
                plan.base_price_cents,
                plan.price_per_additional_cents,
                additional_pump_outs,
            ),
            allocation=allocate_bulk_plan(purchase_date, plan.base_quantity, additional_pump_outs),
        )

    def evaluate_request(self, allocation: BulkPlanAllocation, history: RequestHistory,
                         request_date: date, today: date,
                         subscriber_id: Optional[str] = None) -> BookingDecision:
        """
        Evaluate a pump-out request for a bulk plan holder.

        Args:
            allocation: The subscriber's allocation
            history: Prior requests, as UsageRecords or bare dates
            request_date: Day the service is requested for
            today: Current date, supplied by the caller
            subscriber_id: Identifier used only for log context

        Returns:
            BookingDecision carrying the week verdict and credit counts
        """
        history = list(history)
        subject = subscriber_id or f"bulk-plan-{allocation.year}"

        week_check = validate_bulk_plan_request(request_date, history, allocation.season_end_date)
        used = count_used_pump_outs(history, allocation.year)
        remaining = remaining_pump_outs(allocation.total_pump_outs, used)
        status = derive_plan_status(allocation, used, today)
        in_season = to_date(request_date).year == allocation.year

        context = {
            "request_date": format_iso_date(request_date),
            "today": format_iso_date(today),
            "used_pump_outs": used,
            "total_pump_outs": allocation.total_pump_outs,
        }

        log_booking_decision(
            self.booking_logger,
            check_name="week_conflict",
            passed=week_check.is_valid,
            subject=subject,
            reason=week_check.reason.value if week_check.reason else None,
            context=context,
        )
        log_booking_decision(
            self.booking_logger,
            check_name="credits",
            passed=remaining > 0,
            subject=subject,
            reason=None if remaining > 0 else RejectionReason.NO_CREDITS_REMAINING.value,
            context=context,
        )

        if not in_season or status == PlanStatus.INACTIVE:
            season_reason = RejectionReason.OUTSIDE_PLAN_SEASON
        elif status == PlanStatus.EXPIRED:
            season_reason = RejectionReason.PLAN_EXPIRED
        else:
            season_reason = None
        log_booking_decision(
            self.booking_logger,
            check_name="plan_season",
            passed=season_reason is None,
            subject=subject,
            reason=season_reason.value if season_reason else None,
            context={**context, "plan_status": status.value},
        )

        if week_check.reason == RejectionReason.PLAN_EXPIRED:
            reason, message = week_check.reason, week_check.message
        elif season_reason is not None:
            reason = season_reason
            message = rejection_message(reason, allocation.season_end_date, year=allocation.year)
        elif not week_check.is_valid:
            reason, message = week_check.reason, week_check.message
        elif remaining == 0:
            reason = RejectionReason.NO_CREDITS_REMAINING
            message = rejection_message(
                reason, allocation.season_end_date, total=allocation.total_pump_outs)
        else:
            reason, message = None, None

        return BookingDecision(
            week_check=week_check,
            used_pump_outs=used,
            remaining_pump_outs=remaining,
            status=status,
            in_season=in_season,
            reason=reason,
            message=message,
        )

    def usage_summary(self, allocation: BulkPlanAllocation, history: RequestHistory,
                      today: date, subscriber_id: Optional[str] = None) -> UsageSummary:
        """Summarize consumption of an allocation as of ``today``."""
        summary = summarize_usage(allocation, history, today)

        log_plan_status(
            self.booking_logger,
            subject=subscriber_id or f"bulk-plan-{allocation.year}",
            status=summary.status.value,
            remaining=summary.remaining_pump_outs,
            context={
                "today": format_iso_date(today),
                "used_pump_outs": summary.used_pump_outs,
                "open_weeks": summary.open_weeks,
            }
        )
        return summary
