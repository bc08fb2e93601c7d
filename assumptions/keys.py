"""
Typed names for every numeric assumption that can be resolved per month.

Each member's value is the matching field name on AssumptionSet, so
`getattr(assumptions, key.value)` is the base value.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class AssumptionKey(str, Enum):
    # pricing & market
    MARKET_PENETRATION = "market_penetration"
    TRANSACTION_FEE_RATE = "transaction_fee_rate"
    SAAS_BASE_PRICING = "saas_base_pricing"
    DEALER_WEBSITE_COST = "dealer_website_cost"
    LEAD_GEN_COST_PER_LEAD = "lead_gen_cost_per_lead"
    TRANSACTIONS_PER_CUSTOMER = "transactions_per_customer"
    AVG_TRANSACTION_PRICE = "avg_transaction_price"

    # customer economics
    CUSTOMER_ACQUISITION_COST = "customer_acquisition_cost"
    CUSTOMER_LIFETIME_YEARS = "customer_lifetime_years"
    ANNUAL_CHURN_RATE = "annual_churn_rate"

    # implementations
    IMPLEMENTATION_PRICE = "implementation_price"
    CONTRACTORS_SPIKE_PERCENTAGE = "contractors_spike_percentage"
    MAINTENANCE_PERCENTAGE = "maintenance_percentage"
    MAINTENANCE_START_MONTH = "maintenance_start_month"

    # monthly expenses
    EXPENSE_PAYROLL = "expense_payroll"
    EXPENSE_CONTRACTORS = "expense_contractors"
    EXPENSE_TRAVEL_MARKETING = "expense_travel_marketing"
    EXPENSE_LICENSE_FEES = "expense_license_fees"
    EXPENSE_SHARED_SERVICES = "expense_shared_services"
    EXPENSE_LEGAL = "expense_legal"
    EXPENSE_COMPANY_VEHICLE = "expense_company_vehicle"
    EXPENSE_INSURANCE = "expense_insurance"
    EXPENSE_CONTINGENCIES = "expense_contingencies"
    EXPENSE_CONSULTANT_AUDIT = "expense_consultant_audit"


EXPENSE_KEYS: Tuple[AssumptionKey, ...] = (
    AssumptionKey.EXPENSE_PAYROLL,
    AssumptionKey.EXPENSE_CONTRACTORS,
    AssumptionKey.EXPENSE_TRAVEL_MARKETING,
    AssumptionKey.EXPENSE_LICENSE_FEES,
    AssumptionKey.EXPENSE_SHARED_SERVICES,
    AssumptionKey.EXPENSE_LEGAL,
    AssumptionKey.EXPENSE_COMPANY_VEHICLE,
    AssumptionKey.EXPENSE_INSURANCE,
    AssumptionKey.EXPENSE_CONTINGENCIES,
    AssumptionKey.EXPENSE_CONSULTANT_AUDIT,
)

# Values used by the engine when an assumption is missing (None).
FALLBACK_VALUES: Dict[AssumptionKey, float] = {
    AssumptionKey.SAAS_BASE_PRICING: 0.0,
    AssumptionKey.DEALER_WEBSITE_COST: 0.0,
    AssumptionKey.LEAD_GEN_COST_PER_LEAD: 0.0,
    AssumptionKey.TRANSACTION_FEE_RATE: 0.0,
    AssumptionKey.TRANSACTIONS_PER_CUSTOMER: 168.0,
    AssumptionKey.AVG_TRANSACTION_PRICE: 158993.0,
    AssumptionKey.MARKET_PENETRATION: 0.0,
    AssumptionKey.ANNUAL_CHURN_RATE: 0.0,
    AssumptionKey.CUSTOMER_ACQUISITION_COST: 0.0,
    AssumptionKey.CUSTOMER_LIFETIME_YEARS: 0.0,
    AssumptionKey.IMPLEMENTATION_PRICE: 500000.0,
    AssumptionKey.CONTRACTORS_SPIKE_PERCENTAGE: 0.0,
    AssumptionKey.MAINTENANCE_PERCENTAGE: 18.0,
    AssumptionKey.MAINTENANCE_START_MONTH: 3.0,
    AssumptionKey.EXPENSE_PAYROLL: 110000.0,
    AssumptionKey.EXPENSE_CONTRACTORS: 50000.0,
    AssumptionKey.EXPENSE_TRAVEL_MARKETING: 30000.0,
    AssumptionKey.EXPENSE_LICENSE_FEES: 15000.0,
    AssumptionKey.EXPENSE_SHARED_SERVICES: 18000.0,
    AssumptionKey.EXPENSE_LEGAL: 10000.0,
    AssumptionKey.EXPENSE_COMPANY_VEHICLE: 6000.0,
    AssumptionKey.EXPENSE_INSURANCE: 5000.0,
    AssumptionKey.EXPENSE_CONTINGENCIES: 5000.0,
    AssumptionKey.EXPENSE_CONSULTANT_AUDIT: 2000.0,
}
