from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

import pandas as pd

from .config import DEFAULT_COMPONENTS, DEFAULT_FROM_MONTH, DEFAULT_FROM_YEAR


@dataclass(frozen=True)
class Selection:
    year: int = DEFAULT_FROM_YEAR
    month: int = DEFAULT_FROM_MONTH
    components: List[str] = field(default_factory=list)


def effective_from_date(selection: Selection, min_date, max_date) -> pd.Timestamp:
    """First day of the chosen month, clamped into the dataset's date range."""
    requested = pd.Timestamp(year=int(selection.year), month=int(selection.month), day=1)
    return min(max(requested, pd.Timestamp(min_date)), pd.Timestamp(max_date))


def default_components(available: Iterable[str]) -> List[str]:
    have = set(available)
    return [c for c in DEFAULT_COMPONENTS if c in have]


def year_options(min_date, max_date) -> List[int]:
    return list(range(pd.Timestamp(min_date).year, pd.Timestamp(max_date).year + 1))


def month_options(year: int, min_date, max_date) -> List[int]:
    lo, hi = pd.Timestamp(min_date), pd.Timestamp(max_date)
    first = lo.month if year == lo.year else 1
    last = hi.month if year == hi.year else 12
    return list(range(first, last + 1))


def clamp_year(year: int, min_date, max_date) -> int:
    opts = year_options(min_date, max_date)
    return min(max(int(year), opts[0]), opts[-1])
