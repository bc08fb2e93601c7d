"""
Market-penetration scenario comparison.

Each comparison point rebuilds the assumption snapshot with the point's
penetration, then recomputes both the market opportunity (annual run-rate at
full penetration) and the full monthly projection. Nothing is scaled linearly
from the current penetration, so non-linear effects (onboarding pace, the
customer cap, churn) show up in the projected figures.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional

import pandas as pd

from assumptions.model import AssumptionSet
from core.config import CashSettings, ProjectionConfig
from engine.runner import run_projection

from .opportunity import market_opportunity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioPoint:
    penetration_percent: float
    dealer_count: int
    annual_revenue_millions: float
    projected_revenue_millions: float
    ending_cash_balance: float


def compare_penetration_scenarios(
    assumptions: AssumptionSet,
    *,
    cash: Optional[CashSettings] = None,
    config: Optional[ProjectionConfig] = None,
    points: Optional[Iterable[float]] = None,
) -> List[ScenarioPoint]:
    """
    Evaluate the model at each penetration percentage in `points`
    (defaults to config.comparison_points: 5, 10, 15, 25, 35).

    annual_revenue_millions     market opportunity total (all streams) / 1e6
    projected_revenue_millions  canonical total revenue of the projection's
                                last 12 months / 1e6
    """
    config = config or ProjectionConfig()
    points = tuple(points) if points is not None else config.comparison_points

    scenarios = []
    for pct in points:
        snapshot = assumptions.with_values(market_penetration=float(pct))
        opportunity = market_opportunity(snapshot, config.market)
        result = run_projection(snapshot, cash=cash, config=config)

        trailing = result.records[-12:]
        projected = sum(r.total_revenue for r in trailing)

        scenarios.append(
            ScenarioPoint(
                penetration_percent=float(pct),
                dealer_count=opportunity.target_dealerships,
                annual_revenue_millions=opportunity.total_revenue / 1e6,
                projected_revenue_millions=projected / 1e6,
                ending_cash_balance=result.ending_cash_balance,
            )
        )
        logger.debug(
            "Scenario %.1f%%: %d dealers, %.2fM run-rate, %.2fM projected",
            pct,
            opportunity.target_dealerships,
            opportunity.total_revenue / 1e6,
            projected / 1e6,
        )

    return scenarios


def scenarios_to_frame(scenarios: Iterable[ScenarioPoint]) -> pd.DataFrame:
    """One row per scenario, ordered as given."""
    return pd.DataFrame([asdict(s) for s in scenarios])
