# Home.py
import streamlit as st

from price_changes.theme import apply_chart_theme
from ui_helpers import ONS_LINK, render_footer, render_page_header

apply_chart_theme("UK Price Changes")

render_page_header(
    "UK Price Changes",
    subtitle="How the cost of everyday goods and services has moved since a month of your choosing.",
    description=f"Built on the consumer price index published monthly by the {ONS_LINK}. Use the sidebar to open the explorer.",
)

st.markdown(
    """
### Tools Available

- **UK Price Changes**
  Pick a start month and a set of goods and services. Each item's price index is rebased to that month, so every line starts at 0% and shows the cumulative change since then. Items that got more expensive are drawn in reds, items that got cheaper in blues, with darker shades for bigger moves. The dashed line marks overall inflation (all items) over the same window. Hover a point to read its change; click it to pin the details under the chart.

### Refreshing the data

The chart reads `static/data/cpi_components.csv`. To pull the latest ONS release and overwrite it, run:

```
pip install -e .
python scripts/update_cpi.py
```

Set `PRICE_CHANGES_DATA` to point the app at a different copy of the file (a path or a URL).
"""
)

render_footer()
