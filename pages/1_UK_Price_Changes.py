import calendar
import logging

import pandas as pd
import streamlit as st

from cpi_cache import load_cpi_rows
from price_changes import LoadFailure, Selection, default_components, derive_state, pick_from_event
from price_changes.charts import build_figure
from price_changes.config import DATA_SOURCE, DEFAULT_FROM_MONTH, DEFAULT_FROM_YEAR, HEADLINE_COMPONENT
from price_changes.loader import available_components, date_bounds
from price_changes.selection import clamp_year, month_options, year_options
from price_changes.theme import apply_chart_theme, render_source_status
from ui_helpers import ONS_LINK, render_footer, render_page_header, section_title

logger = logging.getLogger(__name__)

apply_chart_theme("Explore price changes in the UK")

render_page_header(
    "Explore price changes in the UK",
    description=(
        "Track how prices have changed for consumer goods and services in the UK. "
        "Choose a month from which to measure the percentage change, based on the consumer "
        f"price index (CPI) published by the {ONS_LINK}."
    ),
)

# --- Data ---
try:
    rows = load_cpi_rows(DATA_SOURCE)
except LoadFailure as e:
    logger.error("CPI load failed: %s", e)
    st.error(f"{e}. Run `python scripts/update_cpi.py` to download the data, then reload the page.")
    st.stop()

min_date, max_date = date_bounds(rows)
available = available_components(rows)
defaults = default_components(available)

if "components" not in st.session_state:
    st.session_state["components"] = defaults


def _reset_components():
    st.session_state["components"] = defaults


# --- Sidebar ---
with st.sidebar:
    st.header("About This Tool")
    st.markdown(
        """
        Each line shows how the price of a good or service has moved since the chosen month.

        • Index levels come from the ONS consumer price indices release (MM23)
        • Change is measured against each item's index in the first month shown
        • Red lines got more expensive, blue lines got cheaper; darker means a bigger move
        • The dashed line is overall inflation (all items) over the same window
        """
    )
    st.markdown("---")
    st.button("Reset to default selection", on_click=_reset_components)

# --- Controls ---
years = year_options(min_date, max_date)
col1, col2 = st.columns(2)
year = col1.selectbox(
    f"Pick a year between {years[0]} and {years[-1]}",
    years,
    index=years.index(clamp_year(DEFAULT_FROM_YEAR, min_date, max_date)),
)
months = month_options(year, min_date, max_date)
month = col2.selectbox(
    "Month",
    months,
    index=months.index(DEFAULT_FROM_MONTH) if DEFAULT_FROM_MONTH in months else 0,
    format_func=lambda m: calendar.month_name[m],
)

components = st.multiselect(
    "Choose consumer goods and services to see in the graph",
    available,
    key="components",
)

state = derive_state(Selection(year=year, month=month, components=components), rows)

render_source_status(
    source="ONS",
    rows=len(rows),
    updated=f"{max_date:%b %Y}",
    tags=[f"FROM {state.from_date:%b %Y}", f"{len(state.series)} SERIES"],
)

# --- Chart ---
if state.empty_selection:
    st.info("Choose at least one good or service above to see how its price has changed.")
    st.stop()

if state.empty_window:
    st.warning(f"No data for the selected goods and services from {state.from_date:%B %Y}.")
    st.stop()

latest = sorted(state.series, key=lambda s: s.latest)
m1, m2, m3 = st.columns(3)
m1.metric("Overall inflation", "N/A" if state.headline_latest is None else f"{state.headline_latest:.1%}")
m2.metric("Biggest rise", latest[-1].name if latest[-1].latest > 0 else "None", f"{latest[-1].latest:+.1%}")
m3.metric("Biggest fall", latest[0].name if latest[0].latest < 0 else "None", f"{latest[0].latest:+.1%}", delta_color="inverse")

event = st.plotly_chart(
    build_figure(state),
    use_container_width=False,
    on_select="rerun",
    selection_mode="points",
    key="price_chart",
)

# Clicking a point pins its tooltip below the chart
picked = event.selection.points if event and event.selection else []
if picked:
    info = pick_from_event(picked[0], state)
    if info is not None:
        st.markdown(
            f"<span style='color:{info.color}; font-size:1.2rem;'>●</span> **{info.component}**: {info.text}",
            unsafe_allow_html=True,
        )

# --- Tables & download ---
section_title("Latest change by item", f"{state.from_date:%B %Y} to {state.to_date:%B %Y}")
summary = pd.DataFrame(
    {
        "Item": [s.name for s in state.series],
        f"Index ({state.from_date:%b %Y})": [s.baseline for s in state.series],
        "Change": [s.latest for s in state.series],
    }
).sort_values("Change", ascending=False)
st.dataframe(
    summary.style.format({"Change": "{:+.1%}", summary.columns[1]: "{:.1f}"}),
    hide_index=True,
    use_container_width=True,
)

with st.expander("Download Data"):
    pts = state.points()
    st.download_button(
        "Download CSV",
        pts.to_csv(index=False, date_format="%Y-%m-%d"),
        file_name=f"uk_price_changes_from_{state.from_date:%Y_%m}.csv",
        mime="text/csv",
    )

with st.expander("Methodology & Sources", expanded=False):
    st.markdown(
        f"""
        **Data:** ONS consumer price indices (MM23), CPI component index levels (2015=100), monthly from January 1988.
        **Change:** `(index_t - index_first) / index_first`, where `index_first` is the item's index in the first month shown.
        **Overall inflation:** the same change for `{HEADLINE_COMPONENT}` at the latest month.
        **Update cadence:** the CSV is refreshed offline with `scripts/update_cpi.py`.
        """
    )

render_footer()
