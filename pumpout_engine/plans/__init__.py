"""
Plan catalog module.

Holds the bulk plan definitions (prices and included quantities) the
engine prices purchases against.
"""
from .catalog import PlanCatalog, ServicePlan

__all__ = ["PlanCatalog", "ServicePlan"]
