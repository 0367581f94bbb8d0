"""UK CPI price change explorer: transforms, scales and chart helpers."""

from .colors import assign_colors, interpolate_color, with_colors
from .hover import hit_test, markers_for, pick_from_event, tooltip_position
from .loader import LoadFailure, load_rows
from .pipeline import ChartState, derive_state
from .selection import Selection, default_components, effective_from_date
from .series import Series, build_series, filter_from

__all__ = [
    "LoadFailure",
    "load_rows",
    "Series",
    "build_series",
    "filter_from",
    "assign_colors",
    "interpolate_color",
    "with_colors",
    "Selection",
    "default_components",
    "effective_from_date",
    "ChartState",
    "derive_state",
    "hit_test",
    "markers_for",
    "pick_from_event",
    "tooltip_position",
]
