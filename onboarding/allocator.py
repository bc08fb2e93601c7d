"""
Onboarding allocator — spread a dealer penetration target across the timeline.

Two strategies produce a plan of monthly new-customer additions:

  survival-weighted even ("even")
      Same number of additions every month, sized so that after monthly churn
      decay the end-of-timeline active count lands on the target. The rounding
      residual is forced entirely into the final month.

  power-law pace ("power_law")
      Month j (1-indexed from start_index) gets weight j ** exponent, where the
      exponent comes from a "pace" slider:
          pace 0.5   -> exponent 8    strongly back-loaded, slow ramp-up
          pace 10    -> exponent 0.5  fast ramp
          pace 20.5+ -> exponent 0    perfectly even
      Weights are scaled to the target and rounded; the residual is walked
      backward from the last active month (see distribute_residual).

Months before start_index receive zero. A non-positive target or month count
gives an all-zero plan.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

import numpy as np

from core.utils import excel_round

logger = logging.getLogger(__name__)

STRATEGIES = ("even", "power_law")


def pace_to_exponent(pace: float) -> float:
    if pace >= 20.5:
        return 0.0
    clamped = min(max(float(pace), 0.5), 20.0)
    if clamped <= 10.0:
        return max(0.5, min(8.0, ((10.5 - clamped) / 10.0) * 8.0))
    # 10x .. 20.5x: linear from 0.5 down toward 0
    fraction = (20.5 - clamped) / (20.5 - 10.0)
    return max(0.0, 0.5 * fraction)


def distribute_residual(alloc: Sequence[int], residual: int) -> List[int]:
    """
    Absorb an integer rounding residual into an allocation, one unit at a time.

    Starts at the LAST slot and walks backward, wrapping around circularly,
    adding +1 (positive residual) or -1 (negative residual) per visit. A slot
    already at zero is skipped when decrementing, so entries never go negative.
    """
    out = [int(v) for v in alloc]
    n = len(out)
    if n == 0:
        return out

    # cannot remove more than is allocated
    residual = max(int(residual), -sum(out))

    idx = n - 1
    while residual != 0:
        step = 1 if residual > 0 else -1
        if out[idx] + step >= 0:
            out[idx] += step
            residual -= step
        idx = (idx - 1) % n
    return out


def simulate_end_active(plan: Sequence[int], monthly_churn: float) -> int:
    """Active customers after the last month: floor-decay then add, month by month."""
    active = 0
    for added in plan:
        active = math.floor(active * (1.0 - monthly_churn)) + int(added)
    return active


def survival_weighted_allocation(target: int, months: int, monthly_churn: float) -> List[int]:
    months = int(months)
    target = int(target)
    if months <= 0 or target <= 0:
        return [0] * max(months, 0)

    weights = np.ones(months, dtype=float)
    # an addition in month i must survive (months - 1 - i) churn steps
    survival = np.power(1.0 - monthly_churn, months - 1 - np.arange(months))
    effective_sum = float((weights * survival).sum())
    factor = target / effective_sum if effective_sum > 0 else 0.0

    plan = np.floor(weights * factor).astype(int).tolist()

    diff = target - simulate_end_active(plan, monthly_churn)
    if diff != 0:
        plan[-1] = max(0, plan[-1] + diff)
    return plan


def power_law_allocation(target: int, months: int, pace: float, start_index: int = 0) -> List[int]:
    months = int(months)
    target = int(target)
    if months <= 0 or target <= 0:
        return [0] * max(months, 0)

    start = min(max(0, int(start_index)), months - 1)
    active_months = max(1, months - start)
    exponent = pace_to_exponent(pace)

    weights = np.power(np.arange(1, active_months + 1, dtype=float), exponent)
    scaled = weights / weights.sum() * target
    alloc = excel_round(scaled, 0).astype(int).tolist()

    alloc = distribute_residual(alloc, target - sum(alloc))
    return [0] * start + alloc


def allocate(target: int, months: int, strategy: str = "even", **params) -> List[int]:
    """
    Dispatch to an allocation strategy.

    strategy="even"      params: monthly_churn (default 0.0)
    strategy="power_law" params: pace (default 10.0), start_index (default 0)
    """
    if strategy == "even":
        plan = survival_weighted_allocation(target, months, params.get("monthly_churn", 0.0))
    elif strategy == "power_law":
        plan = power_law_allocation(
            target, months, params.get("pace", 10.0), params.get("start_index", 0)
        )
    else:
        raise ValueError(f"Unknown allocation strategy {strategy!r}; expected one of {STRATEGIES}.")

    logger.debug("Allocated %d dealers over %d months (%s): %s", target, months, strategy, plan)
    return plan
