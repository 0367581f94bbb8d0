"""Header, section and footer helpers shared by the explorer's pages."""
from __future__ import annotations

from typing import Optional

import streamlit as st

ONS_LINK = "<a href='https://www.ons.gov.uk/economy/inflationandpriceindices' target='_blank'>Office for National Statistics</a>"
ONS_CREDIT = (
    "Source: Office for National Statistics, consumer price indices (MM23). "
    "Contains public sector information licensed under the Open Government Licence v3.0."
)


def render_page_header(title: str, subtitle: Optional[str] = None, description: Optional[str] = None) -> None:
    st.title(title)
    if subtitle:
        st.subheader(subtitle)
    if description:
        # styled by .page-description in price_changes.theme
        st.markdown(f"<div class='page-description'>{description}</div>", unsafe_allow_html=True)
    st.markdown("---")


def section_title(label: str, description: Optional[str] = None) -> None:
    st.markdown(f"#### {label}")
    if description:
        st.caption(description)


def render_footer() -> None:
    st.markdown("---")
    st.caption(ONS_CREDIT)
