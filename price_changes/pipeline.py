"""
Single recompute entry point for the dashboard.

`derive_state` runs the whole transform (window filter, series, colors,
domains, ticks) from the immutable rows and the current selection. The page
calls it on every rerun and never patches a previous state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from .colors import with_colors
from .config import HEADLINE_COMPONENT
from .loader import date_bounds
from .scales import (
    ChartLayout,
    LinearScale,
    TimeScale,
    is_long_window,
    time_domain,
    time_scale,
    time_tick_labels,
    value_domain,
    value_scale,
    value_tick_labels,
)
from .selection import Selection, effective_from_date
from .series import Series, build_series, filter_from


@dataclass(frozen=True, eq=False)
class ChartState:
    from_date: pd.Timestamp
    to_date: pd.Timestamp
    series: List[Series]
    headline: Optional[Series]
    layout: ChartLayout
    x_scale: TimeScale
    y_scale: LinearScale
    x_ticks: List[pd.Timestamp] = field(default_factory=list)
    y_ticks: List[float] = field(default_factory=list)
    x_labels: List[str] = field(default_factory=list)
    y_labels: List[str] = field(default_factory=list)
    long_window: bool = False
    empty_selection: bool = False
    empty_window: bool = False

    @property
    def headline_latest(self) -> Optional[float]:
        return self.headline.latest if self.headline is not None else None

    @property
    def has_chart(self) -> bool:
        return not (self.empty_selection or self.empty_window)

    @property
    def title(self) -> str:
        return f"Price changes in the UK from {self.from_date:%B %Y} to {self.to_date:%B %Y}"

    def points(self) -> pd.DataFrame:
        frames = [s.points for s in self.series]
        if not frames:
            return pd.DataFrame(columns=["year", "date", "component", "value", "change"])
        return pd.concat(frames, ignore_index=True)


def _unique(names):
    seen = set()
    return [n for n in names if not (n in seen or seen.add(n))]


def derive_state(selection: Selection, rows: pd.DataFrame, layout: Optional[ChartLayout] = None) -> ChartState:
    layout = layout or ChartLayout()
    min_date, max_date = date_bounds(rows) if not rows.empty else time_domain([])
    from_date = effective_from_date(selection, min_date, max_date)

    built = build_series(filter_from(rows, from_date))
    headline = built.get(HEADLINE_COMPONENT)

    wanted = _unique(selection.components)
    colored = with_colors({n: built[n] for n in wanted if n in built})
    shown = list(colored.values())

    dates = [d for s in shown for d in s.points["date"]]
    changes = [c for s in shown for c in s.points["change"]]
    t_dom = time_domain(dates)
    v_dom = value_domain(changes, headline.latest if headline is not None else None)

    x = time_scale(t_dom, layout)
    y = value_scale(v_dom, layout)
    long_window = is_long_window(from_date, max_date)
    x_ticks, y_ticks = x.ticks(), y.ticks()

    return ChartState(
        from_date=t_dom[0] if shown else from_date,
        to_date=t_dom[1] if shown else max_date,
        series=shown,
        headline=headline,
        layout=layout,
        x_scale=x,
        y_scale=y,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        x_labels=time_tick_labels(x_ticks, long_window),
        y_labels=value_tick_labels(y_ticks),
        long_window=long_window,
        empty_selection=not wanted,
        empty_window=bool(wanted) and not shown,
    )
