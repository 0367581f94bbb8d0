"""Domains, pixel scales and axis ticks for the price change chart."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from matplotlib.ticker import MaxNLocator

from . import config

FALLBACK_VALUE_DOMAIN = (-0.1, 0.1)
MONTH_STEPS = (1, 2, 3, 6, 12, 24, 60, 120)


@dataclass(frozen=True)
class ChartLayout:
    width: int = config.CHART_WIDTH
    height: int = config.CHART_HEIGHT
    top: int = config.MARGIN_TOP
    right: int = config.MARGIN_RIGHT
    bottom: int = config.MARGIN_BOTTOM
    left: int = config.MARGIN_LEFT

    @property
    def x_range(self) -> Tuple[float, float]:
        return float(self.left), float(self.width - self.right)

    @property
    def y_range(self) -> Tuple[float, float]:
        # inverted: larger values sit higher on screen
        return float(self.height - self.bottom), float(self.top)


@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, v: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (v - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, px: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return d0
        return d0 + (px - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = config.TARGET_TICKS) -> List[float]:
        return value_ticks(self.domain, count)


@dataclass(frozen=True)
class TimeScale:
    domain: Tuple[pd.Timestamp, pd.Timestamp]
    range: Tuple[float, float]

    @property
    def _linear(self) -> LinearScale:
        d0, d1 = self.domain
        return LinearScale((float(d0.value), float(d1.value)), self.range)

    def __call__(self, when) -> float:
        return self._linear(float(pd.Timestamp(when).value))

    def invert(self, px: float) -> pd.Timestamp:
        return pd.Timestamp(int(round(self._linear.invert(px))))

    def ticks(self, count: int = config.TARGET_TICKS) -> List[pd.Timestamp]:
        return time_ticks(self.domain, count)


# --- Domains ---

def time_domain(dates: Iterable) -> Tuple[pd.Timestamp, pd.Timestamp]:
    """[min, max] of dates, or a single-instant domain at now when empty."""
    ds = pd.DatetimeIndex(list(dates))
    if ds.empty:
        now = pd.Timestamp.now().normalize()
        return now, now
    return ds.min(), ds.max()


def value_domain(changes: Iterable[float], headline_latest: Optional[float] = None) -> Tuple[float, float]:
    """Extent of the plotted changes, widened to include 0 and the headline line."""
    vals = [float(v) for v in changes if v is not None and np.isfinite(v)]
    if not vals and headline_latest is None:
        return FALLBACK_VALUE_DOMAIN
    vals.append(0.0)
    if headline_latest is not None:
        vals.append(float(headline_latest))
    return min(vals), max(vals)


def time_scale(domain, layout: ChartLayout) -> TimeScale:
    return TimeScale(domain, layout.x_range)


def value_scale(domain, layout: ChartLayout) -> LinearScale:
    return LinearScale(domain, layout.y_range)


# --- Ticks ---

def value_ticks(domain: Sequence[float], count: int = config.TARGET_TICKS) -> List[float]:
    lo, hi = float(domain[0]), float(domain[1])
    if hi == lo:
        return [lo]
    locator = MaxNLocator(nbins=count, steps=[1, 2, 2.5, 5, 10])
    eps = (hi - lo) * 1e-9
    return [round(float(t), 12) for t in locator.tick_values(lo, hi) if lo - eps <= t <= hi + eps]


def _month_index(ts: pd.Timestamp) -> int:
    return ts.year * 12 + ts.month - 1


def time_ticks(domain, count: int = config.TARGET_TICKS) -> List[pd.Timestamp]:
    """Month-start ticks on a whole-month step, aligned to multiples of the step."""
    lo, hi = pd.Timestamp(domain[0]), pd.Timestamp(domain[1])
    if hi <= lo:
        return [lo]
    span = _month_index(hi) - _month_index(lo)
    step = next((s for s in MONTH_STEPS if span / s <= count), MONTH_STEPS[-1])

    first = _month_index(lo)
    if lo != pd.Timestamp(year=lo.year, month=lo.month, day=1):
        first += 1
    first += (-first) % step
    ticks = []
    idx = first
    while True:
        ts = pd.Timestamp(year=idx // 12, month=idx % 12 + 1, day=1)
        if ts > hi:
            break
        ticks.append(ts)
        idx += step
    return ticks or [lo]


# --- Labels ---

def is_long_window(from_date, max_date, years: int = config.LONG_WINDOW_YEARS) -> bool:
    return pd.Timestamp(from_date) < pd.Timestamp(max_date) - pd.DateOffset(years=years)


def time_tick_labels(ticks: Sequence[pd.Timestamp], long_window: bool) -> List[str]:
    fmt = "%Y" if long_window else "%b %Y"
    return [pd.Timestamp(t).strftime(fmt) for t in ticks]


def pct_decimals(ticks: Sequence[float]) -> int:
    if len(ticks) < 2:
        return 0
    step_pct = abs(ticks[1] - ticks[0]) * 100
    if step_pct >= 1 or step_pct == 0:
        return 0
    return int(math.ceil(-math.log10(step_pct)))


def value_tick_labels(ticks: Sequence[float]) -> List[str]:
    d = pct_decimals(ticks)
    return [f"{t:.{d}%}" for t in ticks]
