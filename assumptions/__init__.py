"""
Assumptions — typed keys, the immutable AssumptionSet snapshot, and per-month resolution.
"""

from .keys import AssumptionKey, EXPENSE_KEYS, FALLBACK_VALUES
from .model import (
    Adjustment,
    AssumptionSet,
    ContinuousGrowth,
    EvenOnboarding,
    OnboardingSchedule,
    PacedOnboarding,
    RampConfig,
)
from .resolver import resolve, resolve_or
from .defaults import default_assumptions

__all__ = [
    "AssumptionKey",
    "EXPENSE_KEYS",
    "FALLBACK_VALUES",
    "Adjustment",
    "AssumptionSet",
    "ContinuousGrowth",
    "EvenOnboarding",
    "OnboardingSchedule",
    "PacedOnboarding",
    "RampConfig",
    "resolve",
    "resolve_or",
    "default_assumptions",
]
