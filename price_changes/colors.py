"""
Diverging red/blue colors keyed on each series' latest change.

Rises are shaded from light to dark red relative to the largest rise,
falls from light to dark blue relative to the largest fall.
"""
from __future__ import annotations

from typing import Dict, Iterable, Mapping, Tuple

from matplotlib.colors import to_hex, to_rgb

from .config import FALL_HIGH, FALL_LOW, RISE_HIGH, RISE_LOW
from .series import Series

RGB = Tuple[int, int, int]


def hex_to_rgb(color: str) -> RGB:
    """0-255 channels of any matplotlib color spec ("#4d0000", "#fff", "darkred")."""
    return tuple(int(round(c * 255)) for c in to_rgb(color))


def rgb_to_hex(rgb: RGB) -> str:
    return to_hex([c / 255 for c in rgb])


def interpolate_color(start: str, end: str, t: float) -> str:
    """Per-channel linear blend; callers clamp t to [0, 1]."""
    a, b = hex_to_rgb(start), hex_to_rgb(end)
    return rgb_to_hex(tuple(int(round(x + (y - x) * t)) for x, y in zip(a, b)))


def gradient_fraction(color: str, start: str, end: str) -> float:
    """Recover t from a blended color using the channel with the widest span."""
    c, a, b = hex_to_rgb(color), hex_to_rgb(start), hex_to_rgb(end)
    i = max(range(3), key=lambda k: abs(b[k] - a[k]))
    if b[i] == a[i]:
        return 0.0
    return (c[i] - a[i]) / (b[i] - a[i])


def extremes(latest_values: Iterable[float]) -> Tuple[float, float]:
    vals = list(latest_values)
    pos_max = max((v for v in vals if v >= 0), default=0.0)
    neg_min = min((v for v in vals if v < 0), default=0.0)
    return pos_max, neg_min


def color_for(latest: float, pos_max: float, neg_min: float) -> str:
    if latest >= 0:
        t = min(latest / pos_max, 1.0) if pos_max > 0 else 0.5
        return interpolate_color(RISE_LOW, RISE_HIGH, t)
    t = min(abs(latest) / abs(neg_min), 1.0) if neg_min < 0 else 0.5
    return interpolate_color(FALL_LOW, FALL_HIGH, t)


def assign_colors(series: Mapping[str, Series]) -> Dict[str, str]:
    pos_max, neg_min = extremes(s.latest for s in series.values())
    return {name: color_for(s.latest, pos_max, neg_min) for name, s in series.items()}


def with_colors(series: Mapping[str, Series]) -> Dict[str, Series]:
    colors = assign_colors(series)
    return {name: s.with_color(colors[name]) for name, s in series.items()}
