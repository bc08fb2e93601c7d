"""
Numeric-coherence checks for assumption snapshots before they enter the engine.

Catches problems early:
- Overrides set for months past the end of the timeline
- Ramps that start outside the timeline
- Percentages outside 0..100
- Negative plan entries, prices or expenses
- Investment months that are malformed or never reached

The engine itself never raises on these; the runner logs whatever is found.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from numbers import Real
from typing import List, Sequence

from assumptions.keys import AssumptionKey, FALLBACK_VALUES
from assumptions.model import AssumptionSet, OnboardingSchedule, PacedOnboarding
from core.config import CashSettings
from core.utils import MonthPeriod

_MONTH_KEY = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")

_PERCENT_KEYS = (
    AssumptionKey.MARKET_PENETRATION,
    AssumptionKey.ANNUAL_CHURN_RATE,
    AssumptionKey.TRANSACTION_FEE_RATE,
    AssumptionKey.CONTRACTORS_SPIKE_PERCENTAGE,
    AssumptionKey.MAINTENANCE_PERCENTAGE,
)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for an assumption snapshot."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def extend(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _check_plan(name: str, plan: Sequence[int], n_months: int, result: ValidationResult) -> None:
    if len(plan) > n_months:
        result.warnings.append(
            f"{name} has {len(plan)} entries; only the first {n_months} are used."
        )
    n_neg = sum(1 for v in plan if v < 0)
    if n_neg > 0:
        result.errors.append(f"{name} has {n_neg} negative entries.")


def validate_assumptions(assumptions: AssumptionSet, *, n_months: int = 29) -> ValidationResult:
    """
    Run all numeric-coherence checks on an assumption snapshot.
    Returns a ValidationResult with errors (incoherent) and warnings (informational).
    """
    result = ValidationResult()

    # --- Base values ---
    for key in AssumptionKey:
        value = assumptions.base_value(key)
        if value is None:
            result.warnings.append(
                f"{key.value} is missing; fallback {FALLBACK_VALUES.get(key, 0.0)} is used."
            )
        elif value < 0:
            result.warnings.append(f"{key.value} is negative ({value}).")

    for key in _PERCENT_KEYS:
        value = assumptions.base_value(key)
        if value is not None and not 0 <= value <= 100:
            result.errors.append(f"{key.value} must be a percentage in [0, 100], got {value}.")

    # --- Overrides & ramps ---
    for key, adjustment in assumptions.adjustments.items():
        if adjustment.overrides is not None:
            # slots past the timeline are never read
            beyond = [v for v in adjustment.overrides[n_months:] if v is not None]
            if beyond:
                result.warnings.append(
                    f"{len(beyond)} overrides for {key.value} fall after month {n_months - 1} "
                    f"and are ignored."
                )
            n_neg = sum(1 for v in adjustment.overrides if isinstance(v, Real) and v < 0)
            if n_neg > 0:
                result.warnings.append(f"{n_neg} override slots for {key.value} are negative.")

        ramp = adjustment.ramp
        if ramp is not None and ramp.enabled:
            if not 0 <= ramp.start_month < n_months:
                result.warnings.append(
                    f"Ramp for {key.value} starts at month {ramp.start_month}, "
                    f"outside the {n_months}-month timeline."
                )
            if ramp.monthly_percent <= -100:
                result.errors.append(
                    f"Ramp for {key.value} has monthly_percent {ramp.monthly_percent} <= -100."
                )

    # --- Plans ---
    _check_plan("implementation_plan", assumptions.implementation_plan, n_months, result)

    model = assumptions.customer_model
    if isinstance(model, OnboardingSchedule):
        _check_plan("Onboarding schedule", model.additions, n_months, result)
        if len(model.additions) < n_months:
            result.warnings.append(
                f"Onboarding schedule has {len(model.additions)} entries; "
                f"remaining months add no dealers."
            )
    elif isinstance(model, PacedOnboarding):
        if not 0.5 <= model.pace <= 20.5:
            result.warnings.append(f"Onboarding pace {model.pace} is clamped to [0.5, 20.5].")
        if not 0 <= model.start_index < n_months:
            result.warnings.append(
                f"Onboarding start_index {model.start_index} is clamped to [0, {n_months - 1}]."
            )

    return result


def validate_cash_settings(cash: CashSettings, timeline: Sequence[MonthPeriod]) -> ValidationResult:
    result = ValidationResult()

    if cash.investment_month is not None:
        if not _MONTH_KEY.match(cash.investment_month):
            result.errors.append(
                f"investment_month {cash.investment_month!r} is not in YYYY-MM form."
            )
        elif cash.investment_month not in {p.key for p in timeline}:
            result.warnings.append(
                f"investment_month {cash.investment_month} is outside the projection timeline; "
                f"no inflow is applied."
            )

    if cash.investment_amount < 0:
        result.warnings.append(f"investment_amount is negative ({cash.investment_amount}).")

    return result
