"""
Error classification for the scheduling engine.

Booking and purchase rejections are returned as structured results, not
raised. The exceptions here signal configuration and catalog problems.
"""

from .configuration import (
    EngineError,
    ConfigurationError,
    PlanCatalogError,
    UnknownPlanError,
)

__all__ = [
    "EngineError",
    "ConfigurationError",
    "PlanCatalogError",
    "UnknownPlanError",
]
