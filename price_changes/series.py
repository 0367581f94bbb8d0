"""Per-component series with change measured against the first month in the window."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

import pandas as pd

POINT_COLUMNS = ["year", "date", "component", "value", "change"]


@dataclass(frozen=True, eq=False)
class Series:
    name: str
    points: pd.DataFrame  # year, date, component, value, change
    latest: float
    color: Optional[str] = None

    def with_color(self, color: str) -> "Series":
        return replace(self, color=color)

    @property
    def baseline(self) -> float:
        return float(self.points["value"].iloc[0])


def filter_from(rows: pd.DataFrame, from_date) -> pd.DataFrame:
    return rows.loc[rows["date"] >= pd.Timestamp(from_date)]


def relative_change(values: pd.Series) -> pd.Series:
    baseline = float(values.iloc[0])
    if baseline == 0:
        return pd.Series(0.0, index=values.index)
    return (values - baseline) / baseline


def build_series(rows: pd.DataFrame) -> Dict[str, Series]:
    """
    Group rows by component and compute each point's change versus the
    component's first value in the window. Colors are resolved later.
    """
    out: Dict[str, Series] = {}
    for name, grp in rows.groupby("component", sort=False, observed=True):
        if grp.empty:
            continue
        pts = grp.sort_values("date", kind="mergesort").reset_index(drop=True).copy()
        pts["change"] = relative_change(pts["value"])
        out[str(name)] = Series(
            name=str(name),
            points=pts[POINT_COLUMNS],
            latest=float(pts["change"].iloc[-1]),
        )
    return out
