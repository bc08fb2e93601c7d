"""
Active-customer projection.

With an onboarding plan, each month replays
    active = floor(active * (1 - monthly_churn)) + plan[i]
capped at floor(total_dealerships * penetration / 100), so the penetration
target is a hard ceiling even if the plan overshoots it.

Without a plan (ContinuousGrowth) the count is a straight-line 1.5%/month
market-share growth decayed by compounding retention:
    base   = floor(penetration/100 * total * (1 + i * 0.015))
    active = floor(base * (1 - monthly_churn) ** i)
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from assumptions.model import (
    DEFAULT_TIMELINE_MONTHS,
    AssumptionSet,
    ContinuousGrowth,
    EvenOnboarding,
    OnboardingSchedule,
    PacedOnboarding,
)
from core.utils import round_half_up

from .allocator import power_law_allocation, survival_weighted_allocation

DEFAULT_MONTHLY_GROWTH = 0.015


def _penetration(assumptions: AssumptionSet) -> float:
    return float(assumptions.market_penetration or 0.0)


def target_dealers(assumptions: AssumptionSet, total_dealerships: int) -> int:
    """Dealer count the allocators aim for (rounded)."""
    return round_half_up(total_dealerships * _penetration(assumptions) / 100.0)


def penetration_cap(assumptions: AssumptionSet, total_dealerships: int) -> int:
    """Hard ceiling on active customers (floored)."""
    return max(0, math.floor(total_dealerships * _penetration(assumptions) / 100.0))


def onboarding_plan(
    assumptions: AssumptionSet,
    total_dealerships: int,
    n_months: int,
) -> Optional[List[int]]:
    """Monthly additions for the assumption set's customer model, or None for ContinuousGrowth."""
    model = assumptions.customer_model

    if isinstance(model, ContinuousGrowth):
        return None
    if isinstance(model, OnboardingSchedule):
        additions = [max(0, int(v)) for v in model.additions[:n_months]]
        return additions + [0] * (n_months - len(additions))

    target = target_dealers(assumptions, total_dealerships)
    if isinstance(model, PacedOnboarding):
        return power_law_allocation(target, n_months, model.pace, model.start_index)
    if isinstance(model, EvenOnboarding):
        return survival_weighted_allocation(target, n_months, assumptions.monthly_churn_rate)

    raise ValueError(f"Unsupported customer model: {type(model).__name__}")


def active_customer_series(
    plan: Sequence[int],
    n_months: int,
    monthly_churn: float,
    cap: int,
) -> List[int]:
    series = []
    active = 0
    for i in range(n_months):
        added = int(plan[i]) if i < len(plan) else 0
        active = math.floor(active * (1.0 - monthly_churn)) + added
        active = max(0, min(active, cap))
        series.append(active)
    return series


def project_active(
    assumptions: AssumptionSet,
    month_index: int,
    total_dealerships: int,
    *,
    plan: Optional[Sequence[int]] = None,
    n_months: int = DEFAULT_TIMELINE_MONTHS,
) -> Optional[int]:
    """
    Active customers at `month_index` under the onboarding plan.
    Returns None when the customer model has no plan (caller uses the
    continuous-growth formula instead).
    """
    if not assumptions.use_onboarding_plan:
        return None
    if plan is None:
        plan = onboarding_plan(assumptions, total_dealerships, n_months)
    series = active_customer_series(
        plan,
        month_index + 1,
        assumptions.monthly_churn_rate,
        penetration_cap(assumptions, total_dealerships),
    )
    return series[month_index]


def continuous_growth_customers(
    assumptions: AssumptionSet,
    month_index: int,
    total_dealerships: int,
    monthly_growth: float = DEFAULT_MONTHLY_GROWTH,
) -> int:
    growth = 1.0 + month_index * monthly_growth
    base_customers = math.floor(_penetration(assumptions) / 100.0 * total_dealerships * growth)
    retention = (1.0 - assumptions.monthly_churn_rate) ** month_index
    return max(0, math.floor(base_customers * retention))


def active_customers(
    assumptions: AssumptionSet,
    n_months: int,
    total_dealerships: int,
    *,
    monthly_growth: float = DEFAULT_MONTHLY_GROWTH,
    plan: Optional[Sequence[int]] = None,
) -> List[int]:
    """
    Active customers for every month of the timeline, whichever customer model applies.
    Replays `plan` when given; otherwise derives it from the customer model.
    """
    if plan is None:
        plan = onboarding_plan(assumptions, total_dealerships, n_months)
    if plan is None:
        return [
            continuous_growth_customers(assumptions, i, total_dealerships, monthly_growth)
            for i in range(n_months)
        ]
    return active_customer_series(
        plan,
        n_months,
        assumptions.monthly_churn_rate,
        penetration_cap(assumptions, total_dealerships),
    )
