"""
Expense & cash ledger — turns a month's revenue into a MonthlyRecord.

  expenses      ten categories, each resolved independently (override > ramp > base)
  contractors   base contractor expense + implementation_revenue * contractors_spike_percentage/100
                (spike only in months with implementation revenue)
  net income    total_revenue - total_expenses
  investment    one-time inflow when the month's "YYYY-MM" key equals CashSettings.investment_month
  cash          cumulative_cash[i] = cumulative_cash[i-1] + net_income[i] + investment_inflow[i]

Cash is never clamped; a negative balance is a funding shortfall, not an error.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Dict, Optional

from assumptions.keys import AssumptionKey as K
from assumptions.model import AssumptionSet
from assumptions.resolver import resolve, resolve_or
from core.config import CashSettings
from core.schema import EXPENSE_CATEGORIES
from core.utils import MonthPeriod

from .revenue import RevenueBreakdown


@dataclass(frozen=True)
class ExpenseBreakdown:
    payroll: float = 0.0
    contractors: float = 0.0  # includes contractor_spike
    travel_marketing: float = 0.0
    license_fees: float = 0.0
    shared_services: float = 0.0
    legal: float = 0.0
    company_vehicle: float = 0.0
    insurance: float = 0.0
    contingencies: float = 0.0
    consultant_audit: float = 0.0

    contractor_spike: float = 0.0

    @property
    def total(self) -> float:
        return sum(getattr(self, c) for c in EXPENSE_CATEGORIES)

    def as_dict(self) -> Dict[str, float]:
        return {c: getattr(self, c) for c in EXPENSE_CATEGORIES}


@dataclass(frozen=True)
class RecordOverride:
    """
    Manual replacements for one month's statement lines (None keeps the computed value).

    An edited total_expenses leaves the ten expense categories as computed; the
    difference is carried on the record as expense_adjustment so the category
    columns plus the adjustment always add up to total_expenses.
    """

    subscription_revenue: Optional[float] = None
    transaction_revenue: Optional[float] = None
    implementation_revenue: Optional[float] = None
    maintenance_revenue: Optional[float] = None
    total_expenses: Optional[float] = None
    investment_inflow: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class MonthlyRecord:
    period: MonthPeriod
    customers: int
    revenue: RevenueBreakdown
    subscription_revenue: float
    transaction_revenue: float
    implementation_revenue: float
    maintenance_revenue: float
    total_revenue: float
    expenses: ExpenseBreakdown
    total_expenses: float
    net_income: float
    investment_inflow: float
    cumulative_cash_balance: float
    expense_adjustment: float = 0.0

    def as_row(self) -> Dict[str, object]:
        """Flat dict keyed by core.schema.RECORD_COLUMNS."""
        row: Dict[str, object] = {
            "index": self.period.index,
            "key": self.period.key,
            "label": self.period.label,
            "year": self.period.year,
            "month": self.period.month,
            "customers": self.customers,
            "saas_revenue": self.revenue.saas_revenue,
            "website_revenue": self.revenue.website_revenue,
            "subscription_revenue": self.subscription_revenue,
            "transactions": self.revenue.transactions,
            "transaction_revenue": self.transaction_revenue,
            "implementation_count": self.revenue.implementation_count,
            "implementation_revenue": self.implementation_revenue,
            "maintenance_revenue": self.maintenance_revenue,
            "lead_gen_revenue": self.revenue.lead_gen_revenue,
            "total_revenue": self.total_revenue,
        }
        for category, value in self.expenses.as_dict().items():
            row[f"expense_{category}"] = value
        row["contractor_spike"] = self.expenses.contractor_spike
        row["expense_adjustment"] = self.expense_adjustment
        row["total_expenses"] = self.total_expenses
        row["net_income"] = self.net_income
        row["investment_inflow"] = self.investment_inflow
        row["cumulative_cash_balance"] = self.cumulative_cash_balance
        return row


_EXPENSE_KEY_BY_CATEGORY = {
    "payroll": K.EXPENSE_PAYROLL,
    "contractors": K.EXPENSE_CONTRACTORS,
    "travel_marketing": K.EXPENSE_TRAVEL_MARKETING,
    "license_fees": K.EXPENSE_LICENSE_FEES,
    "shared_services": K.EXPENSE_SHARED_SERVICES,
    "legal": K.EXPENSE_LEGAL,
    "company_vehicle": K.EXPENSE_COMPANY_VEHICLE,
    "insurance": K.EXPENSE_INSURANCE,
    "contingencies": K.EXPENSE_CONTINGENCIES,
    "consultant_audit": K.EXPENSE_CONSULTANT_AUDIT,
}


def resolve_expenses(index: int, implementation_revenue: float, assumptions: AssumptionSet) -> ExpenseBreakdown:
    values = {
        category: resolve_or(assumptions, key, index)
        for category, key in _EXPENSE_KEY_BY_CATEGORY.items()
    }

    spike = 0.0
    if implementation_revenue > 0:
        spike_pct = resolve(assumptions, K.CONTRACTORS_SPIKE_PERCENTAGE, index)
        spike = implementation_revenue * ((spike_pct or 0.0) / 100.0)
    values["contractors"] += spike

    return ExpenseBreakdown(contractor_spike=spike, **values)


def investment_inflow(period: MonthPeriod, cash: CashSettings) -> float:
    if cash.investment_month is not None and period.key == cash.investment_month:
        return float(cash.investment_amount or 0.0)
    return 0.0


def ledger_month(
    index: int,
    period: MonthPeriod,
    customers: int,
    revenue: RevenueBreakdown,
    assumptions: AssumptionSet,
    cash: CashSettings,
    running_cash: float,
    override: Optional[RecordOverride] = None,
) -> MonthlyRecord:
    """Close one month: expenses, net income, investment inflow and the running cash balance."""
    expenses = resolve_expenses(index, revenue.implementation_revenue, assumptions)

    lines = {
        "subscription_revenue": revenue.subscription_revenue,
        "transaction_revenue": revenue.transaction_revenue,
        "implementation_revenue": revenue.implementation_revenue,
        "maintenance_revenue": revenue.maintenance_revenue,
        "total_expenses": expenses.total,
        "investment_inflow": investment_inflow(period, cash),
    }
    if override is not None:
        for name, value in asdict(override).items():
            if value is not None:
                lines[name] = float(value)

    total_revenue = (
        lines["subscription_revenue"]
        + lines["transaction_revenue"]
        + lines["implementation_revenue"]
        + lines["maintenance_revenue"]
    )
    net_income = total_revenue - lines["total_expenses"]
    balance = running_cash + net_income + lines["investment_inflow"]

    return MonthlyRecord(
        period=period,
        customers=customers,
        revenue=revenue,
        subscription_revenue=lines["subscription_revenue"],
        transaction_revenue=lines["transaction_revenue"],
        implementation_revenue=lines["implementation_revenue"],
        maintenance_revenue=lines["maintenance_revenue"],
        total_revenue=total_revenue,
        expenses=expenses,
        total_expenses=lines["total_expenses"],
        net_income=net_income,
        investment_inflow=lines["investment_inflow"],
        cumulative_cash_balance=balance,
        expense_adjustment=lines["total_expenses"] - expenses.total,
    )
