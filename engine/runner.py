"""
Projection runner — derives the full monthly income statement from one assumption snapshot.

Flow per run (always the whole timeline, nothing carried over between runs):
  1. Timeline         core.utils.build_timeline (Aug 2025 .. Dec 2027 by default)
  2. Customers        onboarding.projector.active_customers (plan + churn, or continuous growth)
  3. Revenue          engine.revenue.compose_month, with a fresh ImplementationLedger
  4. Expenses & cash  engine.ledger.ledger_month, threading the running cash balance

The result is a pure function of (assumptions, cash, config, record_overrides):
running it twice on the same inputs yields identical records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

import pandas as pd

from assumptions.model import AssumptionSet
from core.config import CashSettings, ProjectionConfig
from core.schema import RECORD_COLUMNS
from core.utils import build_timeline
from inputs.validators import validate_assumptions, validate_cash_settings
from onboarding.projector import active_customers, onboarding_plan

from .ledger import MonthlyRecord, RecordOverride, ledger_month
from .revenue import ImplementationLedger, compose_month

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionResult:
    records: Tuple[MonthlyRecord, ...]
    onboarding_plan: Optional[Tuple[int, ...]]
    assumptions: AssumptionSet
    cash: CashSettings
    config: ProjectionConfig

    def __len__(self) -> int:
        return len(self.records)

    @property
    def ending_cash_balance(self) -> float:
        return self.records[-1].cumulative_cash_balance if self.records else self.cash.initial_cash

    def to_frame(self) -> pd.DataFrame:
        """One row per month, columns in core.schema.RECORD_COLUMNS order."""
        return pd.DataFrame([r.as_row() for r in self.records], columns=list(RECORD_COLUMNS))


def run_projection(
    assumptions: AssumptionSet,
    *,
    cash: Optional[CashSettings] = None,
    config: Optional[ProjectionConfig] = None,
    record_overrides: Optional[Mapping[int, RecordOverride]] = None,
) -> ProjectionResult:
    """
    Run the monthly projection for every month of the timeline.

    Parameters
    ----------
    assumptions : AssumptionSet
        Immutable assumption snapshot (base values, overrides, ramps, customer model)
    cash : CashSettings, optional
        Opening cash and the one-time investment; defaults to zero cash, no investment
    config : ProjectionConfig, optional
        Timeline and market reference data; defaults to Aug 2025 .. Dec 2027, 3,816 dealers
    record_overrides : mapping of month index -> RecordOverride, optional
        Manual statement-line replacements for individual months

    Returns
    -------
    ProjectionResult with one MonthlyRecord per month.
    """
    cash = cash or CashSettings()
    config = config or ProjectionConfig()
    record_overrides = record_overrides or {}

    timeline = build_timeline(config.start, config.n_months)

    validation = validate_assumptions(assumptions, n_months=config.n_months)
    validation.extend(validate_cash_settings(cash, timeline))
    for message in validation.errors + validation.warnings:
        logger.warning("Assumption check: %s", message)

    plan = onboarding_plan(assumptions, config.total_dealerships, config.n_months)
    customers = active_customers(
        assumptions,
        config.n_months,
        config.total_dealerships,
        monthly_growth=config.monthly_customer_growth,
        plan=plan,
    )

    ledger = ImplementationLedger()
    running_cash = float(cash.initial_cash or 0.0)
    records = []
    for period in timeline:
        i = period.index
        revenue = compose_month(
            i,
            period,
            customers[i],
            assumptions,
            ledger,
            leads_per_dealership=config.market.leads_per_dealership,
        )
        record = ledger_month(
            i,
            period,
            customers[i],
            revenue,
            assumptions,
            cash,
            running_cash,
            override=record_overrides.get(i),
        )
        running_cash = record.cumulative_cash_balance
        records.append(record)

    logger.debug(
        "Projected %d months: revenue=%.2f, net income=%.2f, ending cash=%.2f",
        len(records),
        sum(r.total_revenue for r in records),
        sum(r.net_income for r in records),
        running_cash,
    )

    return ProjectionResult(
        records=tuple(records),
        onboarding_plan=tuple(plan) if plan is not None else None,
        assumptions=assumptions,
        cash=cash,
        config=config,
    )
