"""
Tests for reshaping the ONS MM23 release into the long-format CSV.
"""

import pandas as pd
import pytest
import requests

from price_changes import refresh
from price_changes.loader import load_rows
from price_changes.refresh import component_name, fetch_mm23, reshape_mm23, write_components

ALL_ITEMS = "CPI INDEX 00: ALL ITEMS 2015=100"
FOOD = "CPI INDEX 01.1 : FOOD 2015=100"
GARMENTS = "CPI INDEX 03.12 : GARMENTS 2015=100"
RATE = "CPI ANNUAL RATE 00: ALL ITEMS 2015=100"


@pytest.fixture
def mm23():
    """Wide table shaped like the ONS download, metadata rows included."""
    titles = ["CDID", "PreUnit", "Unit", "Release Date", "Next release", "Important Notes"]
    periods = ["1987", "1987 DEC", "1988", "1988 Q1", "1988 JAN", "1988 FEB"]
    return pd.DataFrame(
        {
            "Title": titles + periods,
            ALL_ITEMS: ["D7BT"] + [""] * 5 + ["48.1", "48.0", "49.0", "48.9", "48.4", "48.6"],
            FOOD: ["D7D5"] + [""] * 5 + ["50.0", "50.2", "51.0", "50.9", "50.4", "x"],
            GARMENTS: ["D7F9"] + [""] * 5 + ["90.0", "91.0", "92.0", "92.1", "93.5", "94.0"],
            RATE: ["D7G7"] + [""] * 5 + ["3.7", "3.7", "4.9", "3.3", "3.3", "3.4"],
        }
    )


class TestReshape:
    def test_long_format_columns(self, mm23):
        out = reshape_mm23(mm23)
        assert list(out.columns) == ["Year", "Date", "CPI component", "pct_change"]

    def test_keeps_monthly_rows_from_1988(self, mm23):
        out = reshape_mm23(mm23)
        assert sorted(out["Date"].unique()) == [pd.Timestamp("1988-01-01"), pd.Timestamp("1988-02-01")]
        assert set(out["Year"]) == {1988}
        assert len(out) == 6

    def test_component_names(self, mm23):
        out = reshape_mm23(mm23)
        assert set(out["CPI component"]) == {"Cpi index 00: all items", "Food", "Garments"}

    def test_values_numeric_with_gaps(self, mm23):
        out = reshape_mm23(mm23).set_index(["Date", "CPI component"])["pct_change"]
        assert out[(pd.Timestamp("1988-01-01"), "Garments")] == 93.5
        assert pd.isna(out[(pd.Timestamp("1988-02-01"), "Food")])

    def test_missing_all_items_column(self, mm23):
        with pytest.raises(ValueError):
            reshape_mm23(mm23.drop(columns=[ALL_ITEMS]))

    def test_component_name(self):
        assert component_name("CPI INDEX 04.5 : ELECTRICITY, GAS AND OTHER FUELS 2015=100") == "Electricity, gas and other fuels"
        assert component_name(ALL_ITEMS) == "Cpi index 00: all items"

    def test_written_file_loads(self, mm23, tmp_path):
        """The written CSV is what the dashboard reads; the blank value is dropped on load."""
        path = write_components(reshape_mm23(mm23), tmp_path / "static" / "data" / "cpi.csv")
        rows = load_rows(path)
        assert len(rows) == 5
        assert rows["date"].min() == pd.Timestamp("1988-01-01")


class TestFetch:
    def test_retries_then_succeeds(self, monkeypatch):
        calls = []

        def flaky(url, headers=None, timeout=60):
            calls.append(url)
            if len(calls) < 3:
                raise requests.ConnectionError("boom")
            return b"Title,X\nCDID,Y\n"

        monkeypatch.setattr(refresh, "fetch_bytes", flaky)
        monkeypatch.setattr(refresh.time, "sleep", lambda s: None)
        df = fetch_mm23("http://example.test/mm23.csv", retries=4)
        assert len(calls) == 3
        assert list(df.columns) == ["Title", "X"]

    def test_gives_up_after_retries(self, monkeypatch):
        def down(url, headers=None, timeout=60):
            raise requests.ConnectionError("down")

        monkeypatch.setattr(refresh, "fetch_bytes", down)
        monkeypatch.setattr(refresh.time, "sleep", lambda s: None)
        with pytest.raises(RuntimeError, match="Failed to download MM23"):
            fetch_mm23("http://example.test/mm23.csv", retries=2)
