"""Unit tests for the plan catalog."""

import pytest

from pumpout_engine.errors import ConfigurationError, PlanCatalogError, UnknownPlanError
from pumpout_engine.plans.catalog import PlanCatalog, ServicePlan

ENTRIES = {
    "Royal Flush Bulk": {
        "base_price_cents": 47500,
        "price_per_additional_cents": 2500,
        "base_quantity": 10,
    },
    "Deckhand Bulk": {
        "base_price_cents": 12000,
        "base_quantity": 2,
    },
}


class TestPlanCatalog:
    """Test PlanCatalog construction and lookup."""

    def test_from_entries(self):
        catalog = PlanCatalog.from_entries(ENTRIES, 5000)

        assert len(catalog) == 2
        assert catalog.names() == ["Deckhand Bulk", "Royal Flush Bulk"]
        assert catalog.get("Royal Flush Bulk") == ServicePlan(
            name="Royal Flush Bulk",
            base_price_cents=47500,
            price_per_additional_cents=2500,
            base_quantity=10,
        )

    def test_missing_per_additional_price_uses_default(self):
        catalog = PlanCatalog.from_entries(ENTRIES, 5000)
        assert catalog.get("Deckhand Bulk").price_per_additional_cents == 5000

    def test_unknown_plan(self):
        catalog = PlanCatalog.from_entries(ENTRIES, 5000)

        with pytest.raises(UnknownPlanError) as exc_info:
            catalog.get("Admiral Bulk")

        error = exc_info.value
        assert isinstance(error, PlanCatalogError)
        assert error.plan_name == "Admiral Bulk"
        assert error.available_plans == ["Deckhand Bulk", "Royal Flush Bulk"]

    def test_contains(self):
        catalog = PlanCatalog.from_entries(ENTRIES, 5000)

        assert "Royal Flush Bulk" in catalog
        assert "Admiral Bulk" not in catalog

    def test_invalid_entry_raises(self):
        entries = {"Broken": {"base_price_cents": -1, "base_quantity": 3}}

        with pytest.raises(ConfigurationError) as exc_info:
            PlanCatalog.from_entries(entries, 5000)

        assert [e.field for e in exc_info.value.errors] == ["Broken.base_price_cents"]

    def test_empty_catalog(self):
        catalog = PlanCatalog.from_entries({}, 5000)

        assert len(catalog) == 0
        with pytest.raises(UnknownPlanError):
            catalog.get("Royal Flush Bulk")
