from __future__ import annotations

from typing import Optional

from .model import AssumptionSet


def default_assumptions(
    *,
    expense_ramp_percent: Optional[float] = 2.0,
    expense_ramp_start: int = 10,  # Jun 2026
) -> AssumptionSet:
    """
    Dashboard starting point: 15% penetration, $999 SaaS + $500 website,
    paced onboarding (10x from Sep 2025) and every expense category ramped
    by `expense_ramp_percent` per month from `expense_ramp_start`.
    Pass expense_ramp_percent=None for flat expenses.
    """
    base = AssumptionSet()
    if expense_ramp_percent is None:
        return base
    return base.with_expense_ramp(expense_ramp_percent, expense_ramp_start)
