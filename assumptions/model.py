"""
AssumptionSet — the immutable snapshot every engine function reads.

Updates never mutate a snapshot: each helper (with_values, with_override,
with_ramp, ...) validates and returns a NEW AssumptionSet, so a projection run
always sees one consistent set of inputs.

Per-key modifiers live in `adjustments`:
    adjustments[AssumptionKey.EXPENSE_PAYROLL] = Adjustment(
        overrides=(None, None, 125000.0, ...),          # one slot per month
        ramp=RampConfig(enabled=True, monthly_percent=2, start_month=10),
    )

The customer model is a tagged variant rather than a boolean flag:
    OnboardingSchedule  explicit monthly additions
    PacedOnboarding     additions re-derived by the power-law allocator
    EvenOnboarding      additions re-derived by the survival-weighted allocator
    ContinuousGrowth    no plan; straight-line growth decayed by retention
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Iterable, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from core.config import ProjectionConfig
from core.utils import monthly_churn_rate as _monthly_churn

from .keys import EXPENSE_KEYS, AssumptionKey

DEFAULT_TIMELINE_MONTHS = ProjectionConfig().n_months


class RampConfig(BaseModel):
    """Compounding monthly percentage applied from `start_month` onward."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = True
    monthly_percent: float = 0.0
    start_month: int = 0


class Adjustment(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    overrides: Optional[Tuple[Optional[float], ...]] = None
    ramp: Optional[RampConfig] = None

    @property
    def is_empty(self) -> bool:
        no_overrides = self.overrides is None or all(v is None for v in self.overrides)
        return no_overrides and self.ramp is None


# ---------------------------------------------------------------------------
# Customer models
# ---------------------------------------------------------------------------

class OnboardingSchedule(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["schedule"] = "schedule"
    additions: Tuple[int, ...] = ()


class PacedOnboarding(BaseModel):
    """Front/back-loaded plan; pace 0.5 (slow ramp) .. 20.5 (even)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["paced"] = "paced"
    pace: float = 10.0
    start_index: int = 1  # Sep 2025


class EvenOnboarding(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["even"] = "even"


class ContinuousGrowth(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["continuous"] = "continuous"


CustomerModel = Annotated[
    Union[OnboardingSchedule, PacedOnboarding, EvenOnboarding, ContinuousGrowth],
    Field(discriminator="kind"),
]


class AssumptionSet(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # revenue
    market_penetration: Optional[float] = 15.0  # % of total dealerships
    transaction_fee_rate: Optional[float] = 0.5  # % of transaction value
    saas_base_pricing: Optional[float] = 999.0  # $/month
    dealer_website_cost: Optional[float] = 500.0  # $/month
    lead_gen_cost_per_lead: Optional[float] = 150.0
    transactions_per_customer: Optional[float] = 20.0  # per year
    avg_transaction_price: Optional[float] = 100000.0

    # customer economics
    customer_acquisition_cost: Optional[float] = 15000.0
    customer_lifetime_years: Optional[float] = 7.0
    annual_churn_rate: Optional[float] = 12.0  # %

    # implementations
    implementation_price: Optional[float] = 500000.0
    implementation_plan: Tuple[int, ...] = ()  # implementations started per month
    contractors_spike_percentage: Optional[float] = 40.0  # % of implementation revenue
    maintenance_percentage: Optional[float] = 18.0  # annual % of implementation revenue
    maintenance_start_month: Optional[float] = 3.0  # months after implementation

    # monthly expenses ($)
    expense_payroll: Optional[float] = 110000.0
    expense_contractors: Optional[float] = 70000.0
    expense_travel_marketing: Optional[float] = 30000.0
    expense_license_fees: Optional[float] = 15000.0
    expense_shared_services: Optional[float] = 18000.0
    expense_legal: Optional[float] = 10000.0
    expense_company_vehicle: Optional[float] = 6000.0
    expense_insurance: Optional[float] = 5000.0
    expense_contingencies: Optional[float] = 5000.0
    expense_consultant_audit: Optional[float] = 2000.0

    customer_model: CustomerModel = Field(default_factory=PacedOnboarding)
    adjustments: Dict[AssumptionKey, Adjustment] = Field(default_factory=dict)

    # ----- derived -----

    @property
    def monthly_churn_rate(self) -> float:
        return _monthly_churn(self.annual_churn_rate or 0.0)

    @property
    def use_onboarding_plan(self) -> bool:
        return not isinstance(self.customer_model, ContinuousGrowth)

    def base_value(self, key: AssumptionKey) -> Optional[float]:
        return getattr(self, AssumptionKey(key).value)

    # ----- snapshot updates -----

    def with_values(self, **changes: Any) -> "AssumptionSet":
        """New validated snapshot with `changes` applied on top of this one."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def _with_adjustment(self, key: AssumptionKey, adjustment: Adjustment) -> "AssumptionSet":
        adjustments = dict(self.adjustments)
        if adjustment.is_empty:
            adjustments.pop(key, None)
        else:
            adjustments[key] = adjustment
        return self.with_values(adjustments=adjustments)

    def with_override(
        self,
        key: AssumptionKey,
        month_index: int,
        value: Optional[float],
        *,
        n_months: int = DEFAULT_TIMELINE_MONTHS,
    ) -> "AssumptionSet":
        """
        Set (or, with value=None, unset) one month's override for `key`.
        The slot array spans `n_months`; pass the projection's month count
        when it differs from the default timeline.
        """
        key = AssumptionKey(key)
        if not 0 <= month_index < n_months:
            raise ValueError(f"month_index {month_index} outside 0..{n_months - 1}")
        current = self.adjustments.get(key, Adjustment())
        slots = list(current.overrides) if current.overrides is not None else []
        if len(slots) < n_months:
            slots.extend([None] * (n_months - len(slots)))
        slots[month_index] = value
        overrides = tuple(slots) if any(v is not None for v in slots) else None
        return self._with_adjustment(key, current.model_copy(update={"overrides": overrides}))

    def clear_override(self, key: AssumptionKey, month_index: Optional[int] = None) -> "AssumptionSet":
        """Drop one month's override, or every override for `key` when month_index is None."""
        key = AssumptionKey(key)
        if month_index is not None and month_index < 0:
            raise ValueError(f"month_index {month_index} must be >= 0")
        current = self.adjustments.get(key)
        if current is None or current.overrides is None:
            return self
        if month_index is None:
            return self._with_adjustment(key, current.model_copy(update={"overrides": None}))
        if month_index >= len(current.overrides):
            return self
        return self.with_override(key, month_index, None, n_months=len(current.overrides))

    def with_ramp(
        self,
        key: AssumptionKey,
        monthly_percent: float,
        start_month: int = 0,
        *,
        enabled: bool = True,
    ) -> "AssumptionSet":
        key = AssumptionKey(key)
        ramp = RampConfig(enabled=enabled, monthly_percent=monthly_percent, start_month=start_month)
        current = self.adjustments.get(key, Adjustment())
        return self._with_adjustment(key, current.model_copy(update={"ramp": ramp}))

    def clear_ramp(self, key: AssumptionKey) -> "AssumptionSet":
        key = AssumptionKey(key)
        current = self.adjustments.get(key)
        if current is None or current.ramp is None:
            return self
        return self._with_adjustment(key, current.model_copy(update={"ramp": None}))

    def with_expense_ramp(
        self,
        monthly_percent: float,
        start_month: int,
        keys: Iterable[AssumptionKey] = EXPENSE_KEYS,
    ) -> "AssumptionSet":
        """Apply the same compounding ramp to several expense categories at once."""
        result = self
        for key in keys:
            result = result.with_ramp(key, monthly_percent, start_month)
        return result

    def clear_expense_ramps(self) -> "AssumptionSet":
        result = self
        for key in EXPENSE_KEYS:
            result = result.clear_ramp(key)
        return result
