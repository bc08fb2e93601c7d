"""
Roll monthly records up into quarterly, yearly and whole-range views.

Flow columns (revenue, expenses, net income, transactions, inflows) are summed.
cumulative_cash_balance is a point-in-time balance, so each group takes its
LAST month's value. customers is a head-count stock and is reported as the
rounded mean of the group.

Quarters are consecutive 3-month windows starting at timeline index 0 and are
labelled from their first month: with an August start the windows are
Aug-Oct "Q3 2025", Nov-Jan "Q4 2025", Feb-Apr "Q1 2026", ...; the final window
may be shorter than three months.
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np
import pandas as pd

from core.schema import FLOW_COLUMNS, RECORD_COLUMNS
from core.utils import excel_round
from engine.ledger import MonthlyRecord
from engine.runner import ProjectionResult

RecordsLike = Union[ProjectionResult, pd.DataFrame, Iterable[MonthlyRecord]]


def records_to_frame(records: RecordsLike) -> pd.DataFrame:
    """Accept a ProjectionResult, an iterable of MonthlyRecord, or an already-built frame."""
    if isinstance(records, pd.DataFrame):
        return records.copy()
    if isinstance(records, ProjectionResult):
        return records.to_frame()
    return pd.DataFrame([r.as_row() for r in records], columns=list(RECORD_COLUMNS))


def _quarter_label(month: int, year: int) -> str:
    return f"Q{(month - 1) // 3 + 1} {year}"


def _reduce(df: pd.DataFrame, group_col: str) -> pd.DataFrame:
    agg = {c: "sum" for c in FLOW_COLUMNS if c in df.columns}
    agg.update({
        "customers": "mean",
        "cumulative_cash_balance": "last",
        "key": "first",
        "month": "first",
        "year": "first",
        "label": "first",
    })
    agg["n_months"] = "sum"

    df = df.assign(n_months=1)
    grouped = df.groupby(group_col, sort=True).agg(agg).reset_index()
    grouped["customers"] = excel_round(grouped["customers"].to_numpy(), 0).astype(int)
    grouped["end_key"] = df.groupby(group_col, sort=True)["key"].last().to_numpy()
    grouped = grouped.rename(columns={"key": "start_key"})
    return grouped


def _finish(grouped: pd.DataFrame, drop: Iterable[str]) -> pd.DataFrame:
    front = ["label", "start_key", "end_key", "n_months", "customers"]
    rest = [c for c in FLOW_COLUMNS if c in grouped.columns] + ["cumulative_cash_balance"]
    out = grouped.drop(columns=[c for c in drop if c in grouped.columns])
    return out[front + rest].reset_index(drop=True)


def to_quarterly(records: RecordsLike) -> pd.DataFrame:
    df = records_to_frame(records)
    if df.empty:
        return df
    df = df.sort_values("index").reset_index(drop=True)
    df["_window"] = np.arange(len(df)) // 3
    grouped = _reduce(df, "_window")
    grouped["label"] = [
        _quarter_label(int(m), int(y)) for m, y in zip(grouped["month"], grouped["year"])
    ]
    return _finish(grouped, drop=["_window", "month", "year"])


def to_yearly(records: RecordsLike) -> pd.DataFrame:
    df = records_to_frame(records)
    if df.empty:
        return df
    df = df.sort_values("index").reset_index(drop=True)
    df["_year"] = df["year"]
    grouped = _reduce(df, "_year")
    grouped["label"] = grouped["_year"].astype(str)
    return _finish(grouped, drop=["_year", "month", "year"])


def to_total(records: RecordsLike) -> pd.Series:
    """Whole-range roll-up as a single row (pd.Series)."""
    df = records_to_frame(records)
    if df.empty:
        return pd.Series(dtype=float)
    df = df.sort_values("index").reset_index(drop=True)
    df["_all"] = 0
    grouped = _reduce(df, "_all")
    grouped["label"] = "Total"
    return _finish(grouped, drop=["_all", "month", "year"]).iloc[0]
