"""Point markers in chart pixels, hit-testing and tooltip placement."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .config import MARKER_RADIUS


@dataclass(frozen=True)
class Marker:
    component: str
    date: pd.Timestamp
    change: float
    color: str
    cx: float
    cy: float
    r: float = MARKER_RADIUS


@dataclass(frozen=True)
class HoverInfo:
    component: str
    date: pd.Timestamp
    change: float
    color: str
    x: float
    y: float

    @property
    def text(self) -> str:
        return tooltip_text(self.component, self.date, self.change)


@dataclass(frozen=True)
class Box:
    """On-screen bounding box, as reported by getBoundingClientRect."""

    left: float
    top: float
    width: float
    height: float


def tooltip_text(component: str, date, change: float) -> str:
    verb = "increased" if change >= 0 else "fell"
    return f"By {pd.Timestamp(date):%d %B %Y}, the price of {component.lower()} {verb} by {abs(change):.1%}"


def markers_for(state, series=None, radius: float = MARKER_RADIUS) -> List[Marker]:
    out = []
    for s in state.series if series is None else series:
        for date, change in zip(s.points["date"], s.points["change"]):
            out.append(
                Marker(
                    component=s.name,
                    date=pd.Timestamp(date),
                    change=float(change),
                    color=s.color or "",
                    cx=state.x_scale(date),
                    cy=state.y_scale(change),
                    r=radius,
                )
            )
    return out


def hit_test(pointer: Tuple[float, float], markers: Sequence[Marker]) -> Optional[HoverInfo]:
    """Nearest marker whose hit circle contains the pointer, or None."""
    px, py = pointer
    best, best_d = None, math.inf
    for m in markers:
        d = math.hypot(px - m.cx, py - m.cy)
        if d <= m.r and d < best_d:
            best, best_d = m, d
    if best is None:
        return None
    return HoverInfo(best.component, best.date, best.change, best.color, best.cx, best.cy)


def pointer_from_data(x, y: float, state) -> Tuple[float, float]:
    """Chart pixel position of a data coordinate (e.g. a plotly selection event)."""
    return state.x_scale(pd.Timestamp(x)), state.y_scale(float(y))


def pick_from_event(point: dict, state) -> Optional[HoverInfo]:
    """
    Resolve a plotly selection point to its marker.

    Traces are drawn in state.series order, so curve_number names the
    clicked series. Points where several lines meet resolve to that one.
    """
    curve = point.get("curve_number")
    series = state.series
    if curve is not None and 0 <= int(curve) < len(series):
        series = [series[int(curve)]]
    return hit_test(pointer_from_data(point["x"], point["y"], state), markers_for(state, series))


def tooltip_position(marker_box: Box, container_box: Box) -> Tuple[float, float]:
    """Marker centre relative to the chart container's top-left corner."""
    return (
        marker_box.left + marker_box.width / 2 - container_box.left,
        marker_box.top + marker_box.height / 2 - container_box.top,
    )
