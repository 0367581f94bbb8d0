"""
Tests for marker geometry, hit-testing and tooltip placement.
"""

import pandas as pd
import pytest

from price_changes.hover import (
    Box,
    Marker,
    hit_test,
    markers_for,
    pick_from_event,
    pointer_from_data,
    tooltip_position,
    tooltip_text,
)
from price_changes.pipeline import derive_state
from price_changes.selection import Selection


def _marker(name, cx, cy, r=4.0):
    return Marker(name, pd.Timestamp("2024-01-01"), 0.1, "#4d0000", cx, cy, r)


class TestHitTest:
    def test_marker_under_pointer(self):
        info = hit_test((101.0, 49.0), [_marker("Food", 100, 50)])
        assert info.component == "Food"
        assert info.change == 0.1
        assert info.color == "#4d0000"
        assert (info.x, info.y) == (100, 50)

    def test_miss_returns_none(self):
        assert hit_test((120.0, 50.0), [_marker("Food", 100, 50)]) is None
        assert hit_test((0.0, 0.0), []) is None

    def test_nearest_overlapping_marker_wins(self):
        markers = [_marker("Food", 10, 10), _marker("Clothing", 14, 10)]
        assert hit_test((12.5, 10.0), markers).component == "Clothing"
        assert hit_test((11.0, 10.0), markers).component == "Food"

    def test_edge_of_hit_circle_counts(self):
        assert hit_test((104.0, 50.0), [_marker("Food", 100, 50)]) is not None


class TestMarkers:
    def test_one_marker_per_point(self, rows):
        state = derive_state(Selection(2023, 1, ["Food", "Clothing"]), rows)
        markers = markers_for(state)
        assert len(markers) == 10
        assert {m.color for m in markers} == {s.color for s in state.series}

    def test_markers_inside_plot_area(self, rows):
        state = derive_state(Selection(2023, 1, ["Food", "Clothing", "Electricity, gas and other fuels"]), rows)
        lay = state.layout
        for m in markers_for(state):
            assert lay.left <= m.cx <= lay.width - lay.right
            assert lay.top <= m.cy <= lay.height - lay.bottom

    def test_selection_event_resolves_to_point(self, rows):
        """A clicked data point maps back to its own marker."""
        state = derive_state(Selection(2023, 1, ["Food", "Clothing"]), rows)
        info = hit_test(pointer_from_data("2023-03-01", -0.03, state), markers_for(state))
        assert info.component == "Clothing"
        assert info.date == pd.Timestamp("2023-03-01")
        assert info.change == pytest.approx(-0.03)
        assert info.text == "By 01 March 2023, the price of clothing fell by 3.0%"


class TestPickFromEvent:
    """Every series starts at 0% on the same month, so their first markers coincide."""

    def test_clicked_curve_wins_at_shared_baseline(self, rows):
        state = derive_state(Selection(2023, 1, ["Food", "Clothing"]), rows)
        names = [s.name for s in state.series]
        for curve, name in enumerate(names):
            point = {"x": "2023-01-01", "y": 0.0, "curve_number": curve, "point_index": 0}
            info = pick_from_event(point, state)
            assert info.component == name
            assert info.change == 0.0

    def test_without_curve_number_falls_back_to_all_series(self, rows):
        state = derive_state(Selection(2023, 1, ["Food", "Clothing"]), rows)
        info = pick_from_event({"x": "2023-05-01", "y": 0.10}, state)
        assert info.component == "Food"

    def test_out_of_range_curve_is_ignored(self, rows):
        state = derive_state(Selection(2023, 1, ["Food", "Clothing"]), rows)
        info = pick_from_event({"x": "2023-05-01", "y": -0.05, "curve_number": 7}, state)
        assert info.component == "Clothing"

    def test_only_the_given_series_are_marked(self, rows):
        state = derive_state(Selection(2023, 1, ["Food", "Clothing"]), rows)
        markers = markers_for(state, state.series[1:])
        assert {m.component for m in markers} == {state.series[1].name}


class TestTooltip:
    def test_text_for_rise_and_fall(self):
        assert tooltip_text("Food", "2024-01-01", 0.123) == "By 01 January 2024, the price of food increased by 12.3%"
        assert tooltip_text("Clothing", "2024-02-01", -0.05) == "By 01 February 2024, the price of clothing fell by 5.0%"

    def test_position_relative_to_container(self):
        marker = Box(left=310.0, top=220.0, width=8.0, height=8.0)
        container = Box(left=300.0, top=200.0, width=960.0, height=540.0)
        assert tooltip_position(marker, container) == (14.0, 24.0)

    def test_position_ignores_scroll(self):
        """Scrolling shifts both boxes equally, so the anchor does not move."""
        marker = Box(310.0, 220.0, 8.0, 8.0)
        container = Box(300.0, 200.0, 960.0, 540.0)
        scrolled = (Box(310.0, -380.0, 8.0, 8.0), Box(300.0, -400.0, 960.0, 540.0))
        assert tooltip_position(*scrolled) == tooltip_position(marker, container)
