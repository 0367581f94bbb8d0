"""
Rebuild the long-format CPI component CSV from the ONS MM23 release.

MM23 is a wide table: one row per period (years, quarters and months mixed)
and one column per series, with six metadata rows under the header. We keep
the monthly CPI index columns and melt them to one row per component/month.
"""
from __future__ import annotations

import io
import logging
import re
import time
from pathlib import Path

import pandas as pd
import requests

from .config import (
    COL_COMPONENT,
    COL_DATE,
    COL_VALUE,
    COL_YEAR,
    FIRST_MONTH,
    MAX_RETRIES,
    ONS_MM23_URL,
)

logger = logging.getLogger(__name__)

METADATA_ROWS = 6
ALL_ITEMS_COLUMN = "CPI INDEX 00: ALL ITEMS 2015=100"
COMPONENT_COLUMN = re.compile(r"CPI INDEX \d{2}\.\d{1,2} ")
COMPONENT_PREFIX = r"^CPI INDEX \d{2}\.\d{1,2} : "
COMPONENT_SUFFIX = r" 2015=100$"
MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
YEAR_MONTH = r"^\d{4} (?:%s)$" % "|".join(MONTHS)


def fetch_bytes(url: str, headers=None, timeout: int = 60) -> bytes:
    r = requests.get(url, headers=headers or {"User-Agent": "Mozilla/5.0"}, timeout=timeout)
    r.raise_for_status()
    return r.content


def fetch_mm23(url: str = ONS_MM23_URL, retries: int = MAX_RETRIES) -> pd.DataFrame:
    last_err = None
    delay = 1.0
    for attempt in range(1, retries + 1):
        try:
            return pd.read_csv(io.BytesIO(fetch_bytes(url)), dtype=str, low_memory=False)
        except (requests.RequestException, pd.errors.ParserError) as e:
            last_err = e
            logger.warning("MM23 download attempt %d/%d failed: %s", attempt, retries, e)
            if attempt < retries:
                time.sleep(delay)
                delay *= 2

    raise RuntimeError(f"Failed to download MM23 from {url}: {last_err}")


def component_name(column: str) -> str:
    name = re.sub(COMPONENT_PREFIX, "", column)
    name = re.sub(COMPONENT_SUFFIX, "", name)
    return name.capitalize()


def reshape_mm23(raw: pd.DataFrame) -> pd.DataFrame:
    """Wide MM23 table -> Year, Date, CPI component, pct_change (index level)."""
    df = raw.iloc[METADATA_ROWS:].rename(columns={"Title": COL_DATE})
    if COL_DATE not in df.columns or ALL_ITEMS_COLUMN not in df.columns:
        raise ValueError("MM23 download is missing the Title or all-items CPI column")

    components = sorted(c for c in df.columns if COMPONENT_COLUMN.search(c))
    df = df[[COL_DATE, ALL_ITEMS_COLUMN] + components]

    periods = df[COL_DATE].astype(str).str.strip()
    df = df.loc[periods.str.match(YEAR_MONTH)].copy()
    df[COL_DATE] = pd.to_datetime(periods[df.index].str.title(), format="%Y %b")
    df = df.loc[df[COL_DATE] >= pd.Timestamp(FIRST_MONTH)]

    values = df.drop(columns=COL_DATE).apply(pd.to_numeric, errors="coerce")
    wide = pd.concat([df[[COL_DATE]], values], axis=1)
    wide.insert(0, COL_YEAR, wide[COL_DATE].dt.year)

    long = wide.melt(id_vars=[COL_YEAR, COL_DATE], var_name=COL_COMPONENT, value_name=COL_VALUE)
    long[COL_COMPONENT] = long[COL_COMPONENT].map(component_name)
    long = long.sort_values(COL_DATE, kind="mergesort").reset_index(drop=True)
    logger.info(
        "Reshaped MM23: %d months x %d components",
        long[COL_DATE].nunique(),
        long[COL_COMPONENT].nunique(),
    )
    return long


def write_components(df: pd.DataFrame, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, date_format="%Y-%m-%d")
    return path
