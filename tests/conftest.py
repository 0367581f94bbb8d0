"""Shared fixtures for the price change tests."""

import pandas as pd
import pytest

from price_changes.config import HEADLINE_COMPONENT


def make_rows(records):
    """(component, 'YYYY-MM', value) tuples -> loader-shaped rows."""
    df = pd.DataFrame(records, columns=["component", "month", "value"])
    df["date"] = pd.to_datetime(df["month"] + "-01")
    df["year"] = df["date"].dt.year
    df["value"] = df["value"].astype(float)
    return df[["year", "date", "component", "value"]].sort_values("date", kind="mergesort").reset_index(drop=True)


@pytest.fixture
def rows():
    """Three components plus the all-items headline over five months of 2023."""
    months = ["2023-01", "2023-02", "2023-03", "2023-04", "2023-05"]
    food = [100, 102, 105, 108, 110]
    clothing = [100, 99, 97, 96, 95]
    energy = [100, 120, 130, 125, 140]
    headline = [100, 101, 102, 103, 104]
    records = []
    for m, f, c, e, h in zip(months, food, clothing, energy, headline):
        records += [
            ("Food", m, f),
            ("Clothing", m, c),
            ("Electricity, gas and other fuels", m, e),
            (HEADLINE_COMPONENT, m, h),
        ]
    return make_rows(records)


@pytest.fixture
def csv_text():
    return "\n".join(
        [
            "Year,Date,CPI component,pct_change",
            "2008,2008-02-01,Food,104.5",
            "2008,2008-01-01,Clothing,98.0",
            "2008,2008-01-01,Food,100.0",
            "2008,2008-02-01,Clothing,97.5",
        ]
    )


@pytest.fixture
def csv_path(tmp_path, csv_text):
    path = tmp_path / "cpi_components.csv"
    path.write_text(csv_text + "\n")
    return path
