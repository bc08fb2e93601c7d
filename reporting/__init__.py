"""
Reporting — period roll-ups, customer KPIs, market opportunity and penetration scenarios.
"""

from .aggregator import records_to_frame, to_quarterly, to_total, to_yearly
from .metrics import KpiSummary, compute_kpis, customer_lifetime_value
from .opportunity import MarketOpportunity, market_opportunity
from .scenarios import ScenarioPoint, compare_penetration_scenarios, scenarios_to_frame

__all__ = [
    "records_to_frame",
    "to_quarterly",
    "to_yearly",
    "to_total",
    "KpiSummary",
    "compute_kpis",
    "customer_lifetime_value",
    "MarketOpportunity",
    "market_opportunity",
    "ScenarioPoint",
    "compare_penetration_scenarios",
    "scenarios_to_frame",
]
