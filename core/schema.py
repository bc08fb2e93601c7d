from __future__ import annotations

from typing import Tuple

# Expense categories in income-statement order.
EXPENSE_CATEGORIES: Tuple[str, ...] = (
    "payroll",
    "contractors",
    "travel_marketing",
    "license_fees",
    "shared_services",
    "legal",
    "company_vehicle",
    "insurance",
    "contingencies",
    "consultant_audit",
)

EXPENSE_COLUMNS: Tuple[str, ...] = tuple(f"expense_{c}" for c in EXPENSE_CATEGORIES)

PERIOD_COLUMNS: Tuple[str, ...] = ("index", "key", "label", "year", "month")

# Additive columns: summed when monthly records are rolled up.
FLOW_COLUMNS: Tuple[str, ...] = (
    "saas_revenue",
    "website_revenue",
    "subscription_revenue",
    "transactions",
    "transaction_revenue",
    "implementation_count",
    "implementation_revenue",
    "maintenance_revenue",
    "lead_gen_revenue",
    "total_revenue",
    *EXPENSE_COLUMNS,
    "contractor_spike",
    "expense_adjustment",  # manual total_expenses edit minus the category sum
    "total_expenses",
    "net_income",
    "investment_inflow",
)

# Canonical flattened monthly record.
RECORD_COLUMNS: Tuple[str, ...] = (
    *PERIOD_COLUMNS,
    "customers",
    *FLOW_COLUMNS,
    "cumulative_cash_balance",
)
