"""CSV loader for the long-format CPI component file."""
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
import pandas as pd

from .config import COL_COMPONENT, COL_DATE, COL_VALUE, COL_YEAR

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (COL_DATE, COL_COMPONENT, COL_VALUE)
ROW_COLUMNS = ["year", "date", "component", "value"]


class LoadFailure(Exception):
    """The CPI file could not be fetched or parsed."""


def load_rows(source) -> pd.DataFrame:
    """
    Read the CPI CSV (path, URL or buffer) into typed rows.

    Rows missing a parseable Date, component or value are dropped.
    Returns columns year/date/component/value sorted by date, ties kept
    in file order. Raises LoadFailure if nothing usable can be read.
    """
    try:
        raw = pd.read_csv(source, dtype=str, keep_default_na=True)
    except FileNotFoundError as e:
        raise LoadFailure(f"CPI data file not found: {e.filename or source}") from e
    except Exception as e:
        raise LoadFailure(f"Could not read CPI data from {source}: {e}") from e

    raw = raw.rename(columns=lambda c: str(c).strip())
    missing = [c for c in REQUIRED_COLUMNS if c not in raw.columns]
    if missing:
        raise LoadFailure(f"CPI data is missing column(s): {', '.join(missing)}")

    try:
        rows = parse_rows(raw)
    except (ValueError, TypeError, OverflowError) as e:
        raise LoadFailure(f"Could not parse CPI data from {source}: {e}") from e
    if rows.empty:
        raise LoadFailure(f"CPI data in {source} contains no usable rows")
    return rows


def parse_rows(raw: pd.DataFrame) -> pd.DataFrame:
    # zoned ISO dates become naive UTC so they compare with the selection dates
    dates = pd.to_datetime(raw[COL_DATE], errors="coerce", format="mixed", utc=True).dt.tz_localize(None)
    components = raw[COL_COMPONENT].astype("string").str.strip()
    values = pd.to_numeric(raw[COL_VALUE], errors="coerce")
    if COL_YEAR in raw.columns:
        years = pd.to_numeric(raw[COL_YEAR], errors="coerce").replace([np.inf, -np.inf], np.nan)
    else:
        years = pd.Series(float("nan"), index=raw.index)

    df = pd.DataFrame({"year": years, "date": dates, "component": components, "value": values})
    ok = df["date"].notna() & df["component"].fillna("").ne("") & df["value"].notna()
    dropped = int((~ok).sum())
    if dropped:
        logger.debug("Dropped %d malformed CPI rows", dropped)

    df = df.loc[ok].copy()
    df["date"] = df["date"].dt.normalize()
    df["year"] = df["year"].fillna(df["date"].dt.year).astype(int)
    df["component"] = df["component"].astype(str)
    df["value"] = df["value"].astype(float)
    df = df.sort_values("date", kind="mergesort").reset_index(drop=True)
    logger.info("Loaded %d CPI rows across %d components", len(df), df["component"].nunique())
    return df[ROW_COLUMNS]


def date_bounds(rows: pd.DataFrame) -> Tuple[pd.Timestamp, pd.Timestamp]:
    return rows["date"].min(), rows["date"].max()


def available_components(rows: pd.DataFrame) -> list:
    return sorted(rows["component"].unique().tolist())
