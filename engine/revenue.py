"""
Monthly revenue composition.

Streams for month i with `customers` active dealers:
  subscription    customers * (saas_base_pricing + dealer_website_cost)
  transactional   customers * transactions_per_customer/12 * SEASONAL_FACTORS[calendar month]
                  * avg_transaction_price * transaction_fee_rate/100
  implementation  implementation_plan[i] * implementation_price, booked to the ledger
  maintenance     for each ledger project at least maintenance_start_month old:
                  revenue * maintenance_percentage/100 / 12   (annual rate paid monthly)

total_revenue is the sum of those four. Lead-gen revenue is reported alongside
as its own sub-total and is not part of the canonical total.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from assumptions.keys import AssumptionKey as K
from assumptions.model import AssumptionSet
from assumptions.resolver import resolve_or
from core.utils import MonthPeriod, round_half_up

# Truck-sales seasonality by calendar month (Jan..Dec): spring and fall peaks.
SEASONAL_FACTORS: Tuple[float, ...] = (0.8, 0.9, 1.0, 1.1, 1.2, 1.0, 0.9, 0.8, 0.9, 1.1, 1.2, 1.1)


@dataclass(frozen=True)
class ImplementationProject:
    start_month: int
    revenue: float


@dataclass
class ImplementationLedger:
    """Implementation projects booked so far in a run, in month order."""

    projects: List[ImplementationProject] = field(default_factory=list)

    def record(self, start_month: int, revenue: float) -> ImplementationProject:
        project = ImplementationProject(start_month=start_month, revenue=revenue)
        self.projects.append(project)
        return project

    def maintenance_revenue(self, month_index: int, start_delay: int, annual_percentage: float) -> float:
        total = 0.0
        for project in self.projects:
            if project.start_month > month_index:
                continue
            if month_index - project.start_month >= start_delay:
                total += project.revenue * (annual_percentage / 100.0) / 12.0
        return total


@dataclass(frozen=True)
class RevenueBreakdown:
    saas_revenue: float = 0.0
    website_revenue: float = 0.0
    transactions: float = 0.0
    transaction_revenue: float = 0.0
    implementation_count: int = 0
    implementation_revenue: float = 0.0
    maintenance_revenue: float = 0.0
    lead_gen_revenue: float = 0.0

    @property
    def subscription_revenue(self) -> float:
        return self.saas_revenue + self.website_revenue

    @property
    def total_revenue(self) -> float:
        return (
            self.subscription_revenue
            + self.transaction_revenue
            + self.implementation_revenue
            + self.maintenance_revenue
        )

    @property
    def total_revenue_with_lead_gen(self) -> float:
        return self.total_revenue + self.lead_gen_revenue


def implementations_in_month(assumptions: AssumptionSet, month_index: int) -> int:
    plan = assumptions.implementation_plan
    return int(plan[month_index]) if 0 <= month_index < len(plan) else 0


def compose_month(
    index: int,
    period: MonthPeriod,
    customers: int,
    assumptions: AssumptionSet,
    ledger: ImplementationLedger,
    *,
    leads_per_dealership: int = 500,
) -> RevenueBreakdown:
    """
    Revenue streams for one month. Books any implementation started this month
    into `ledger` before computing maintenance, so projects are always
    considered in month order.
    """
    saas_price = resolve_or(assumptions, K.SAAS_BASE_PRICING, index)
    website_price = resolve_or(assumptions, K.DEALER_WEBSITE_COST, index)

    seasonal = SEASONAL_FACTORS[period.calendar_index]
    avg_price = resolve_or(assumptions, K.AVG_TRANSACTION_PRICE, index)
    per_year = resolve_or(assumptions, K.TRANSACTIONS_PER_CUSTOMER, index)
    fee_rate = resolve_or(assumptions, K.TRANSACTION_FEE_RATE, index)
    transactions = customers * (per_year / 12.0) * seasonal

    implementation_revenue = 0.0
    count = implementations_in_month(assumptions, index)
    if count > 0:
        implementation_revenue = count * resolve_or(assumptions, K.IMPLEMENTATION_PRICE, index)
        ledger.record(index, implementation_revenue)

    maintenance = ledger.maintenance_revenue(
        index,
        start_delay=round_half_up(resolve_or(assumptions, K.MAINTENANCE_START_MONTH, index)),
        annual_percentage=resolve_or(assumptions, K.MAINTENANCE_PERCENTAGE, index),
    )

    lead_price = resolve_or(assumptions, K.LEAD_GEN_COST_PER_LEAD, index)

    return RevenueBreakdown(
        saas_revenue=customers * saas_price,
        website_revenue=customers * website_price,
        transactions=transactions,
        transaction_revenue=transactions * avg_price * (fee_rate / 100.0),
        implementation_count=max(count, 0),
        implementation_revenue=implementation_revenue,
        maintenance_revenue=maintenance,
        lead_gen_revenue=customers * (leads_per_dealership / 12.0) * lead_price,
    )
