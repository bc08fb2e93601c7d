"""
Core package — configuration, timeline, record schema, and shared utilities.
No business logic lives here.
"""

from .schema import EXPENSE_CATEGORIES, FLOW_COLUMNS, RECORD_COLUMNS
from .config import CashSettings, MarketData, ProjectionConfig
from .utils import MonthPeriod, build_timeline, monthly_churn_rate, round_half_up

__all__ = [
    "EXPENSE_CATEGORIES",
    "FLOW_COLUMNS",
    "RECORD_COLUMNS",
    "CashSettings",
    "MarketData",
    "ProjectionConfig",
    "MonthPeriod",
    "build_timeline",
    "monthly_churn_rate",
    "round_half_up",
]
