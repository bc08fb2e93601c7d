"""
Projection configuration.
Market reference data, timeline settings and the cash boundary inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class MarketData:
    """Commercial-truck dealership market reference figures (2023 ATD data)."""

    total_dealerships: int = 3816
    total_revenue: float = 224.65e9
    avg_dealership_revenue: float = 58.87e6
    total_employment: int = 239345
    total_trucks_sold: int = 507277
    avg_truck_price: float = 158993.0
    total_transaction_value: float = 80.65e9

    # software spending
    avg_annual_software_spend: float = 360000.0
    total_software_market: float = 1.37e9

    # lead generation
    leads_per_dealership: int = 500


@dataclass(frozen=True)
class ProjectionConfig:
    start: pd.Timestamp = pd.Timestamp("2025-08-01")
    n_months: int = 29  # Aug 2025 .. Dec 2027 inclusive

    market: MarketData = field(default_factory=MarketData)

    # straight-line market-share growth used when no onboarding plan is modelled
    monthly_customer_growth: float = 0.015

    # penetration percentages used for scenario comparison
    comparison_points: Tuple[float, ...] = (5.0, 10.0, 15.0, 25.0, 35.0)

    @property
    def total_dealerships(self) -> int:
        return self.market.total_dealerships


@dataclass(frozen=True)
class CashSettings:
    initial_cash: float = 0.0
    initial_cash_date: Optional[str] = None  # display only
    investment_amount: float = 0.0
    investment_month: Optional[str] = None  # "YYYY-MM"
