"""Bulk plan definitions loaded from the plan catalog."""

from dataclasses import dataclass
from typing import Any

from ..errors import ConfigurationError, UnknownPlanError
from ..config.validation import ConfigValidator


@dataclass(frozen=True)
class ServicePlan:
    """A purchasable bulk plan."""
    name: str
    base_price_cents: int
    price_per_additional_cents: int
    base_quantity: int


class PlanCatalog:
    """Read-only lookup of bulk plans by name."""

    def __init__(self, plans: dict[str, ServicePlan]):
        self._plans = dict(plans)

    @classmethod
    def from_entries(cls, entries: dict[str, Any],
                     default_price_per_additional_cents: int) -> "PlanCatalog":
        """
        Build a catalog from raw catalog entries.

        Args:
            entries: Plan definitions keyed by plan name
            default_price_per_additional_cents: Used when an entry omits its own

        Raises:
            ConfigurationError: If any entry fails validation
        """
        errors = ConfigValidator.validate_catalog(entries)
        if errors:
            raise ConfigurationError(
                f"Plan catalog has {len(errors)} invalid field(s)",
                errors=errors,
            )

        plans = {
            name: ServicePlan(
                name=name,
                base_price_cents=entry["base_price_cents"],
                price_per_additional_cents=entry.get(
                    "price_per_additional_cents", default_price_per_additional_cents),
                base_quantity=entry["base_quantity"],
            )
            for name, entry in entries.items()
        }
        return cls(plans)

    def get(self, name: str) -> ServicePlan:
        """
        Look up a plan by name.

        Raises:
            UnknownPlanError: If the catalog has no such plan
        """
        try:
            return self._plans[name]
        except KeyError:
            raise UnknownPlanError(
                f"Unknown bulk plan: {name!r}",
                plan_name=name,
                available_plans=self.names(),
            ) from None

    def names(self) -> list[str]:
        return sorted(self._plans)

    def __contains__(self, name: object) -> bool:
        return name in self._plans

    def __len__(self) -> int:
        return len(self._plans)
