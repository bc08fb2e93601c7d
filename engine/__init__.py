"""
Projection engine — revenue composition, expense & cash ledger, and the full-timeline runner.
"""

from .revenue import SEASONAL_FACTORS, ImplementationLedger, RevenueBreakdown, compose_month
from .ledger import ExpenseBreakdown, MonthlyRecord, RecordOverride, ledger_month
from .runner import ProjectionResult, run_projection

__all__ = [
    "SEASONAL_FACTORS",
    "ImplementationLedger",
    "RevenueBreakdown",
    "compose_month",
    "ExpenseBreakdown",
    "MonthlyRecord",
    "RecordOverride",
    "ledger_month",
    "ProjectionResult",
    "run_projection",
]
