import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent

# Path or URL of the long-format CSV written by scripts/update_cpi.py
DEFAULT_DATA_PATH = ROOT_DIR / "static" / "data" / "cpi_components.csv"
DATA_SOURCE = os.getenv("PRICE_CHANGES_DATA") or str(DEFAULT_DATA_PATH)

CACHE_TTL_SECONDS = 24 * 60 * 60

# --- CSV contract ---
COL_DATE = "Date"
COL_YEAR = "Year"
COL_COMPONENT = "CPI component"
COL_VALUE = "pct_change"  # raw index level, not a percent change

HEADLINE_COMPONENT = "Cpi index 00: all items"

DEFAULT_COMPONENTS = [
    "Food",
    "Clothing",
    "Actual rents for housing",
    "Financial services n.e.c.",
    "Electricity, gas and other fuels",
    "Insurance",
    "Personal care",
    "Transport services",
    "Water supply and misc. services for the dwelling",
]
DEFAULT_FROM_YEAR = 2008
DEFAULT_FROM_MONTH = 1

# --- Colors ---
RISE_LOW, RISE_HIGH = "#ffe6e6", "#4d0000"
FALL_LOW, FALL_HIGH = "#cce0ff", "#001f4d"

# --- Chart layout (pixels) ---
CHART_WIDTH = 960
CHART_HEIGHT = 540
MARGIN_TOP = 50
MARGIN_RIGHT = 40
MARGIN_BOTTOM = 40
MARGIN_LEFT = 60
MARKER_RADIUS = 4.0
TARGET_TICKS = 6
LONG_WINDOW_YEARS = 3

# --- Refresh tool ---
ONS_MM23_URL = (
    "https://www.ons.gov.uk/file?uri=/economy/inflationandpriceindices/"
    "datasets/consumerpriceindices/current/mm23.csv"
)
FIRST_MONTH = "1988-01-01"
MAX_RETRIES = 4
