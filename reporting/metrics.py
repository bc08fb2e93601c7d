"""
Customer-economics KPIs.

  customer_lifetime_value = saas_base_pricing * 12 * lifetime_years
                          + avg_transaction_price * transactions_per_customer
                            * transaction_fee_rate/100 * lifetime_years
  ltv_cac_ratio           = customer_lifetime_value / customer_acquisition_cost
  cac_payback_months      = round(customer_acquisition_cost / saas_base_pricing)
                            (subscription revenue only)

A zero or negative denominator leaves the ratio undefined: the field is None
and a warning is logged, rather than propagating inf/NaN.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from assumptions.keys import AssumptionKey as K
from assumptions.model import AssumptionSet
from assumptions.resolver import resolve_or
from core.utils import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KpiSummary:
    customer_lifetime_value: float
    ltv_cac_ratio: Optional[float]
    cac_payback_months: Optional[int]
    avg_revenue_per_customer: Optional[float] = None


def customer_lifetime_value(assumptions: AssumptionSet, month_index: int = 0) -> float:
    saas = resolve_or(assumptions, K.SAAS_BASE_PRICING, month_index)
    years = resolve_or(assumptions, K.CUSTOMER_LIFETIME_YEARS, month_index)
    price = resolve_or(assumptions, K.AVG_TRANSACTION_PRICE, month_index)
    per_year = resolve_or(assumptions, K.TRANSACTIONS_PER_CUSTOMER, month_index)
    fee_rate = resolve_or(assumptions, K.TRANSACTION_FEE_RATE, month_index)
    return saas * 12 * years + price * per_year * (fee_rate / 100.0) * years


def compute_kpis(
    assumptions: AssumptionSet,
    *,
    month_index: int = 0,
    totals: Optional[pd.Series] = None,
) -> KpiSummary:
    """
    Compute KPIs from assumptions resolved at `month_index`.

    Parameters
    ----------
    assumptions : AssumptionSet
        Snapshot the KPIs are read from
    month_index : int
        Month whose resolved values (ramps/overrides applied) are used
    totals : pd.Series, optional
        An aggregated row from reporting.aggregator (to_total / to_yearly row);
        when given, avg_revenue_per_customer = total_revenue / customers
    """
    clv = customer_lifetime_value(assumptions, month_index)
    cac = resolve_or(assumptions, K.CUSTOMER_ACQUISITION_COST, month_index)
    saas = resolve_or(assumptions, K.SAAS_BASE_PRICING, month_index)

    if cac > 0:
        ltv_cac = clv / cac
    else:
        ltv_cac = None
        logger.warning("LTV/CAC undefined: customer_acquisition_cost is %s", cac)

    if saas > 0:
        payback = round_half_up(cac / saas)
    else:
        payback = None
        logger.warning("CAC payback undefined: saas_base_pricing is %s", saas)

    avg_revenue = None
    if totals is not None and totals.get("customers", 0) > 0:
        avg_revenue = float(totals["total_revenue"]) / float(totals["customers"])

    return KpiSummary(
        customer_lifetime_value=clv,
        ltv_cac_ratio=ltv_cac,
        cac_payback_months=payback,
        avg_revenue_per_customer=avg_revenue,
    )
