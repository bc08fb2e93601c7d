from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class MonthPeriod:
    """One month of the projection timeline."""

    index: int
    year: int
    month: int  # 1..12

    @property
    def calendar_index(self) -> int:
        return self.month - 1

    @property
    def key(self) -> str:
        return f"{self.year}-{self.month:02d}"

    @property
    def label(self) -> str:
        return pd.Timestamp(year=self.year, month=self.month, day=1).strftime("%b %Y")


def build_timeline(start: pd.Timestamp, n_months: int) -> Tuple[MonthPeriod, ...]:
    """
    Month descriptors for the projection, starting at the month containing `start`.
    The default configuration yields Aug 2025 (index 0) .. Dec 2027 (index 28).
    """
    first = pd.Timestamp(start).to_pydatetime().replace(day=1)
    periods = []
    for k in range(max(int(n_months), 0)):
        d = first + relativedelta(months=k)
        periods.append(MonthPeriod(index=k, year=d.year, month=d.month))
    return tuple(periods)


def monthly_churn_rate(annual_churn_pct: float) -> float:
    """Annual churn percentage spread evenly across twelve months (12% -> 0.01)."""
    return (float(annual_churn_pct) / 100.0) / 12.0


def excel_round(x, decimals: int = 2):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def round_half_up(value: float) -> int:
    """Scalar rounding with .5 going up, so 569.5 -> 570 and 2.5 -> 3."""
    return int(math.floor(float(value) + 0.5))
