"""
Per-month assumption resolution.

Priority for (key, month):
  1. a numeric override in adjustments[key].overrides[month]
  2. an enabled ramp: base * (1 + monthly_percent/100) ** max(0, month - start_month)
  3. the flat base value

A missing base (None) is returned as-is; callers that need a number use
resolve_or() with their own fallback.
"""

from __future__ import annotations

from numbers import Real
from typing import Optional

from .keys import AssumptionKey, FALLBACK_VALUES
from .model import AssumptionSet


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def resolve(assumptions: AssumptionSet, key: AssumptionKey, month_index: int) -> Optional[float]:
    key = AssumptionKey(key)
    adjustment = assumptions.adjustments.get(key)

    if adjustment is not None and adjustment.overrides is not None:
        if 0 <= month_index < len(adjustment.overrides):
            override = adjustment.overrides[month_index]
            if _is_number(override):
                return override

    base = assumptions.base_value(key)
    ramp = adjustment.ramp if adjustment is not None else None
    if ramp is not None and ramp.enabled and _is_number(base):
        elapsed = max(0, month_index - ramp.start_month)
        return base * (1.0 + ramp.monthly_percent / 100.0) ** elapsed
    return base


def resolve_or(
    assumptions: AssumptionSet,
    key: AssumptionKey,
    month_index: int,
    default: Optional[float] = None,
) -> float:
    """resolve() with a fallback for missing values (defaults to FALLBACK_VALUES[key])."""
    value = resolve(assumptions, key, month_index)
    if value is not None:
        return value
    if default is not None:
        return default
    return FALLBACK_VALUES.get(AssumptionKey(key), 0.0)
