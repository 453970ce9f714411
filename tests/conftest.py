"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date
from pathlib import Path

from pumpout_engine.schedule.models import BulkPlanAllocation, RequestStatus, UsageRecord


SAMPLE_CATALOG = """\
settings:
  pricing:
    default_price_per_additional_cents: 4000
  logging:
    level: DEBUG

plans:
  Royal Flush Bulk:
    base_price_cents: 47500
    price_per_additional_cents: 2500
    base_quantity: 10
  Deckhand Bulk:
    base_price_cents: 12000
    base_quantity: 2
"""


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Config directory holding a small plan catalog."""
    (tmp_path / "plans.yaml").write_text(SAMPLE_CATALOG)
    return tmp_path


@pytest.fixture
def may_allocation() -> BulkPlanAllocation:
    """Ten base plus two extra credits bought on Monday 2024-05-06."""
    return BulkPlanAllocation(
        purchase_date=date(2024, 5, 6),
        base_pump_outs=10,
        additional_pump_outs=2,
        season_end_date=date(2024, 10, 31),
    )


@pytest.fixture
def june_history() -> list[UsageRecord]:
    """Request history for the 2024 season with one cancellation."""
    return [
        UsageRecord(date(2024, 5, 13), RequestStatus.COMPLETED),
        UsageRecord(date(2024, 5, 22), RequestStatus.COMPLETED),
        UsageRecord(date(2024, 6, 4), RequestStatus.CANCELED),
        UsageRecord(date(2024, 6, 12), RequestStatus.SCHEDULED),
    ]
