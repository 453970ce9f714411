"""Unit tests for the bulk plan engine facade."""

import logging
import pytest
from datetime import date
from pathlib import Path
from unittest.mock import patch

from pumpout_engine.engine import BookingDecision, BulkPlanEngine
from pumpout_engine.errors import ConfigurationError, UnknownPlanError
from pumpout_engine.schedule.models import (
    BulkPlanAllocation,
    PlanStatus,
    RejectionReason,
    RequestStatus,
    RequestValidation,
    UsageRecord,
)


@pytest.fixture
def engine(catalog_dir: Path) -> BulkPlanEngine:
    return BulkPlanEngine(config_dir=catalog_dir)


class TestEngineSetup:
    """Test engine construction."""

    def test_loads_catalog(self, engine):
        assert engine.catalog.names() == ["Deckhand Bulk", "Royal Flush Bulk"]
        assert engine.config["pricing"]["default_price_per_additional_cents"] == 4000

    def test_catalog_default_price_comes_from_settings(self, engine):
        assert engine.catalog.get("Deckhand Bulk").price_per_additional_cents == 4000

    def test_accepts_string_path(self, catalog_dir):
        engine = BulkPlanEngine(config_dir=str(catalog_dir))
        assert "Royal Flush Bulk" in engine.catalog

    def test_invalid_overrides_raise(self, catalog_dir):
        with pytest.raises(ConfigurationError) as exc_info:
            BulkPlanEngine(config_dir=catalog_dir, overrides={"logging": {"level": "LOUD"}})

        assert [e.field for e in exc_info.value.errors] == ["level"]

    def test_logging_settings_are_applied(self, catalog_dir):
        with patch("pumpout_engine.engine.configure_logging") as configure:
            BulkPlanEngine(config_dir=catalog_dir, overrides={"logging": {"level": "ERROR"}})

        configure.assert_called_once_with(level="ERROR", format_json=False)

    def test_logging_level_reaches_root_logger(self, catalog_dir):
        root = logging.getLogger()
        previous = root.level
        try:
            BulkPlanEngine(config_dir=catalog_dir, overrides={"logging": {"level": "ERROR"}})
            assert root.level == logging.ERROR
        finally:
            root.setLevel(previous)

    def test_invalid_plan_entry_raises(self, tmp_path):
        (tmp_path / "plans.yaml").write_text(
            "plans:\n  Broken:\n    base_price_cents: 100\n"
        )

        with pytest.raises(ConfigurationError):
            BulkPlanEngine(config_dir=tmp_path)


class TestPurchase:
    """Test purchase window and quoting."""

    def test_purchase_window(self, engine):
        window = engine.purchase_window("Royal Flush Bulk", date(2024, 5, 6))

        assert window.total_available_weeks == 26
        assert window.max_additional_pump_outs == 16

    def test_purchase_window_after_cutoff(self, engine):
        window = engine.purchase_window("Royal Flush Bulk", date(2024, 11, 1))

        assert window.is_valid_purchase_date is False
        assert window.max_additional_pump_outs == 0

    def test_quote(self, engine):
        quote = engine.quote_purchase("Royal Flush Bulk", date(2024, 5, 6), 3)

        assert quote.is_valid
        assert quote.total_cost_cents == 55000
        assert quote.allocation == BulkPlanAllocation(
            purchase_date=date(2024, 5, 6),
            base_pump_outs=10,
            additional_pump_outs=3,
            season_end_date=date(2024, 10, 31),
        )

    def test_quote_base_only(self, engine):
        quote = engine.quote_purchase("Deckhand Bulk", date(2024, 5, 6))

        assert quote.total_cost_cents == 12000
        assert quote.allocation.total_pump_outs == 2

    def test_quote_over_cap(self, engine):
        quote = engine.quote_purchase("Royal Flush Bulk", date(2024, 5, 6), 17)

        assert not quote.is_valid
        assert quote.check.reason == RejectionReason.EXCEEDS_AVAILABLE_WEEKS
        assert quote.total_cost_cents is None
        assert quote.allocation is None

    def test_quote_after_cutoff(self, engine):
        quote = engine.quote_purchase("Royal Flush Bulk", date(2024, 11, 1), 0)

        assert quote.check.reason == RejectionReason.PURCHASE_AFTER_CUTOFF
        assert quote.allocation is None

    def test_unknown_plan(self, engine):
        with pytest.raises(UnknownPlanError):
            engine.quote_purchase("Admiral Bulk", date(2024, 5, 6))


class TestEvaluateRequest:
    """Test booking evaluation."""

    def test_open_week_with_credits_is_accepted(self, engine, may_allocation, june_history):
        decision = engine.evaluate_request(
            may_allocation, june_history, date(2024, 6, 17), today=date(2024, 6, 14))

        assert decision.is_accepted
        assert decision.has_credits
        assert decision.used_pump_outs == 3
        assert decision.remaining_pump_outs == 9
        assert decision.status == PlanStatus.ACTIVE
        assert decision.reason is None
        assert decision.message is None

    def test_week_conflict(self, engine, may_allocation, june_history):
        decision = engine.evaluate_request(
            may_allocation, june_history, date(2024, 6, 10), today=date(2024, 6, 5))

        assert not decision.is_accepted
        assert decision.has_credits
        assert decision.week_check.reason == RejectionReason.WEEK_ALREADY_BOOKED
        assert decision.reason == RejectionReason.WEEK_ALREADY_BOOKED

    def test_canceled_week_is_bookable(self, engine, may_allocation, june_history):
        decision = engine.evaluate_request(
            may_allocation, june_history, date(2024, 6, 6), today=date(2024, 6, 1))

        assert decision.is_accepted

    def test_open_week_without_credits(self, engine, june_history):
        allocation = BulkPlanAllocation(date(2024, 5, 6), 3, 0, date(2024, 10, 31))

        decision = engine.evaluate_request(
            allocation, june_history, date(2024, 7, 1), today=date(2024, 6, 20))

        assert decision.week_check == RequestValidation(is_valid=True)
        assert not decision.has_credits
        assert not decision.is_accepted
        assert decision.status == PlanStatus.DEPLETED
        assert decision.reason == RejectionReason.NO_CREDITS_REMAINING
        assert decision.message == (
            "You have used all 3 pump-outs included in your bulk plan for this season.")

    def test_week_conflict_reported_before_credits(self, engine, june_history):
        allocation = BulkPlanAllocation(date(2024, 5, 6), 3, 0, date(2024, 10, 31))

        decision = engine.evaluate_request(
            allocation, june_history, date(2024, 6, 13), today=date(2024, 6, 10))

        assert decision.reason == RejectionReason.WEEK_ALREADY_BOOKED
        assert not decision.has_credits

    def test_expired_plan(self, engine, may_allocation):
        decision = engine.evaluate_request(
            may_allocation, [], date(2024, 11, 4), today=date(2024, 11, 1))

        assert decision.reason == RejectionReason.PLAN_EXPIRED
        assert decision.status == PlanStatus.EXPIRED

    def test_request_before_cutoff_on_expired_plan(self, engine):
        allocation = BulkPlanAllocation(date(2024, 5, 6), 10, 0, date(2024, 10, 31))

        decision = engine.evaluate_request(
            allocation, [], date(2024, 10, 28), today=date(2024, 11, 15))

        assert decision.week_check.is_valid
        assert decision.has_credits
        assert decision.status == PlanStatus.EXPIRED
        assert not decision.is_bookable
        assert not decision.is_accepted
        assert decision.reason == RejectionReason.PLAN_EXPIRED
        assert decision.message == (
            "Your bulk plan has expired. Please purchase a new plan for next season.")

    def test_request_in_other_season_is_rejected(self, engine):
        allocation = BulkPlanAllocation(date(2024, 5, 6), 10, 0, date(2024, 10, 31))

        decision = engine.evaluate_request(
            allocation, [], date(2023, 6, 5), today=date(2023, 6, 1))

        assert decision.status == PlanStatus.INACTIVE
        assert not decision.in_season
        assert not decision.is_accepted
        assert decision.reason == RejectionReason.OUTSIDE_PLAN_SEASON
        assert decision.message == (
            "Your bulk plan only covers pump-outs in the 2024 season, through October 31st.")

    def test_previous_season_request_during_active_plan(self, engine, may_allocation):
        decision = engine.evaluate_request(
            may_allocation, [], date(2023, 6, 5), today=date(2024, 6, 1))

        assert decision.status == PlanStatus.ACTIVE
        assert not decision.in_season
        assert not decision.is_accepted
        assert decision.reason == RejectionReason.OUTSIDE_PLAN_SEASON

    def test_previous_season_requests_do_not_use_credits(self, engine, may_allocation):
        history = [UsageRecord(date(2023, 6, 5), RequestStatus.COMPLETED)] * 20

        decision = engine.evaluate_request(
            may_allocation, history, date(2024, 6, 3), today=date(2024, 6, 1))

        assert decision.used_pump_outs == 0
        assert decision.is_accepted

    def test_returns_booking_decision(self, engine, may_allocation):
        decision = engine.evaluate_request(
            may_allocation, iter([]), date(2024, 6, 3), today=date(2024, 6, 1))
        assert isinstance(decision, BookingDecision)


class TestUsageSummary:
    """Test usage summary through the engine."""

    def test_summary(self, engine, may_allocation, june_history):
        summary = engine.usage_summary(may_allocation, june_history, today=date(2024, 6, 5),
                                       subscriber_id="owner-17")

        assert summary.used_pump_outs == 3
        assert summary.remaining_pump_outs == 9
        assert summary.status == PlanStatus.ACTIVE
        assert summary.open_weeks == 20
