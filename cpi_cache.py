# cpi_cache.py
import pandas as pd
import streamlit as st

from price_changes.config import CACHE_TTL_SECONDS, DATA_SOURCE
from price_changes.loader import load_rows


@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner="Loading CPI components…")
def load_cpi_rows(source: str = DATA_SOURCE) -> pd.DataFrame:
    df = load_rows(source)
    # category cuts the repeated component labels down to one copy each
    df["component"] = df["component"].astype("category")
    return df
