"""
Configuration and plan catalog error classifications.

Policy outcomes such as a week already being booked are never raised; they
come back as structured results. These exceptions cover the failures that
stop the engine from being set up at all.
"""

from typing import Any, Dict, List, Optional


class EngineError(Exception):
    """Base class for errors raised by the scheduling engine."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(EngineError):
    """Configuration file is unreadable or fails validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source


class PlanCatalogError(EngineError):
    """Plan catalog is missing or inconsistent."""

    def __init__(self, message: str, plan_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.plan_name = plan_name


class UnknownPlanError(PlanCatalogError):
    """Requested plan name is not in the catalog."""

    def __init__(self, message: str, plan_name: Optional[str] = None,
                 available_plans: Optional[List[str]] = None, **kwargs):
        super().__init__(message, plan_name=plan_name, **kwargs)
        self.available_plans = available_plans or []
