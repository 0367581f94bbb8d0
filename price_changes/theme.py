from __future__ import annotations

from datetime import datetime
from typing import Iterable

import streamlit as st

CLASSIC_TEMPLATE = {
    "layout": {
        "paper_bgcolor": "#FFFFFF",
        "plot_bgcolor": "#FFFFFF",
        "font": {"family": "Arial, Helvetica, sans-serif", "color": "#222222", "size": 12},
        "title": {"font": {"color": "#111111", "size": 17}, "x": 0, "xanchor": "left"},
        "showlegend": False,
        "xaxis": {
            "showgrid": False,
            "showline": True,
            "linecolor": "#222222",
            "linewidth": 1,
            "ticks": "outside",
            "zeroline": False,
        },
        "yaxis": {
            "showgrid": False,
            "showline": True,
            "linecolor": "#222222",
            "linewidth": 1,
            "ticks": "outside",
            "zeroline": False,
        },
        "hoverlabel": {
            "bgcolor": "#000000",
            "bordercolor": "#000000",
            "font": {"color": "#FFFFFF", "family": "Arial, sans-serif", "size": 12},
        },
        "hovermode": "closest",
    }
}


def _inject_page_css() -> None:
    if st.session_state.get("_classic_css_applied"):
        return

    css = """
    <style>
        .block-container { padding-top: 1rem; padding-bottom: 1rem; max-width: 1100px; }
        .source-status { border:1px solid #e5e7eb; border-radius:6px; padding:0.3rem 0.6rem; margin-bottom:0.6rem; font-size:0.8rem; color:#5f6368; }
        .source-status .tag { margin-right:0.8rem; }
        div[data-testid="stMultiSelect"] span[data-baseweb="tag"] { background-color:#4d0000; }
        .page-description { color:#2d2f31; font-size:0.95rem; line-height:1.55; margin-bottom:0.4rem; }
        .page-description a { color:#4d0000; }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
    st.session_state["_classic_css_applied"] = True


def render_source_status(source: str, rows: int, updated: str | None = None, tags: Iterable[str] | None = None) -> None:
    tags = list(tags or ["ONS", "MM23"])
    updated = updated or datetime.now().strftime("%Y-%m-%d")
    tag_html = "".join(f'<span class="tag">[{t}]</span>' for t in tags)
    st.markdown(
        f"<div class='source-status'><span class='tag'>SOURCE:{source}</span><span class='tag'>ROWS:{rows:,}</span><span class='tag'>TO:{updated}</span>{tag_html}</div>",
        unsafe_allow_html=True,
    )


def apply_plotly_classic(fig):
    if fig is None:
        return fig
    fig.update_layout(template=CLASSIC_TEMPLATE)
    return fig


def apply_chart_theme(page_title: str | None = None, layout: str = "centered") -> None:
    if page_title and not st.session_state.get("_classic_page_configured"):
        st.set_page_config(page_title=page_title, layout=layout)
        st.session_state["_classic_page_configured"] = True

    _inject_page_css()
