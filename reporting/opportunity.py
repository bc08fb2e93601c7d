"""
Annual market opportunity at full target penetration (no onboarding ramp).

Uses base assumption values (no ramps or overrides) and the market reference
data. Implementation and maintenance revenue are annualised from the first
twelve months of the implementation plan, counting only maintenance months
that fall inside that window.

Two totals are exposed:
  total_revenue              every stream including lead generation
  income_statement_revenue   subscription (SaaS + websites) + transactions
                             + implementations + maintenance, i.e. the same
                             categories as the monthly income statement
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from assumptions.keys import AssumptionKey as K
from assumptions.keys import FALLBACK_VALUES
from assumptions.model import AssumptionSet
from core.config import MarketData
from core.utils import round_half_up

from .metrics import customer_lifetime_value


@dataclass(frozen=True)
class MarketOpportunity:
    target_dealerships: int
    marketplace_users: int
    monthly_saas_revenue: float
    annual_saas_revenue: float
    total_transactions: float
    total_transaction_value: float
    transaction_fee_revenue: float
    website_revenue: float
    total_leads: float
    lead_gen_revenue: float
    implementation_annual_revenue: float
    maintenance_annual_revenue: float
    customer_lifetime_value: float
    ltv_cac_ratio: Optional[float]
    total_addressable_market: float

    @property
    def subscription_revenue(self) -> float:
        return self.annual_saas_revenue + self.website_revenue

    @property
    def income_statement_revenue(self) -> float:
        return (
            self.subscription_revenue
            + self.transaction_fee_revenue
            + self.implementation_annual_revenue
            + self.maintenance_annual_revenue
        )

    @property
    def total_revenue(self) -> float:
        return self.income_statement_revenue + self.lead_gen_revenue


def _base(assumptions: AssumptionSet, key: K, default: Optional[float] = None) -> float:
    value = assumptions.base_value(key)
    if value is not None:
        return float(value)
    return default if default is not None else FALLBACK_VALUES.get(key, 0.0)


def annualised_implementation_revenue(assumptions: AssumptionSet, months: int = 12):
    """(implementation, maintenance) revenue booked inside the first `months` of the plan."""
    price = _base(assumptions, K.IMPLEMENTATION_PRICE)
    pct = _base(assumptions, K.MAINTENANCE_PERCENTAGE)
    delay = round_half_up(_base(assumptions, K.MAINTENANCE_START_MONTH))

    implementation = 0.0
    maintenance = 0.0
    for i, count in enumerate(assumptions.implementation_plan[:months]):
        if count <= 0:
            continue
        revenue = count * price
        implementation += revenue
        maintenance_months = max(0, months - (i + delay))
        maintenance += maintenance_months * revenue * (pct / 100.0) / 12.0
    return implementation, maintenance


def market_opportunity(assumptions: AssumptionSet, market: Optional[MarketData] = None) -> MarketOpportunity:
    market = market or MarketData()

    target = round_half_up(market.total_dealerships * _base(assumptions, K.MARKET_PENETRATION) / 100.0)
    users = target  # every penetrated dealership is on the marketplace

    monthly_saas = target * _base(assumptions, K.SAAS_BASE_PRICING)

    avg_price = _base(assumptions, K.AVG_TRANSACTION_PRICE, market.avg_truck_price)
    per_dealer = _base(assumptions, K.TRANSACTIONS_PER_CUSTOMER)
    total_transactions = users * per_dealer
    transaction_value = total_transactions * avg_price
    fee_revenue = transaction_value * (_base(assumptions, K.TRANSACTION_FEE_RATE) / 100.0)

    website = target * _base(assumptions, K.DEALER_WEBSITE_COST) * 12
    leads = target * market.leads_per_dealership
    lead_gen = leads * _base(assumptions, K.LEAD_GEN_COST_PER_LEAD)

    implementation, maintenance = annualised_implementation_revenue(assumptions)

    clv = customer_lifetime_value(assumptions)
    cac = _base(assumptions, K.CUSTOMER_ACQUISITION_COST)

    tam = (
        market.total_software_market
        + market.total_transaction_value * 0.02  # 2% max transaction fee
        + market.total_dealerships * 1000 * 12  # $1K/month websites
        + market.total_dealerships * 500 * 200  # lead-gen potential
    )

    return MarketOpportunity(
        target_dealerships=target,
        marketplace_users=users,
        monthly_saas_revenue=monthly_saas,
        annual_saas_revenue=monthly_saas * 12,
        total_transactions=total_transactions,
        total_transaction_value=transaction_value,
        transaction_fee_revenue=fee_revenue,
        website_revenue=website,
        total_leads=leads,
        lead_gen_revenue=lead_gen,
        implementation_annual_revenue=implementation,
        maintenance_annual_revenue=maintenance,
        customer_lifetime_value=clv,
        ltv_cac_ratio=clv / cac if cac > 0 else None,
        total_addressable_market=tam,
    )
