"""Plotly figure for the price change chart."""
from __future__ import annotations

import plotly.graph_objects as go

from .hover import tooltip_text
from .pipeline import ChartState
from .theme import apply_plotly_classic

LINE_WIDTH = 1.4
UNSELECTED_OPACITY = 0.15


def headline_label(latest: float) -> str:
    return f"Overall inflation: {latest:.1%}"


def series_trace(s) -> go.Scatter:
    pts = s.points
    return go.Scatter(
        x=pts["date"],
        y=pts["change"],
        name=s.name,
        mode="lines+markers",
        line=dict(color=s.color, width=LINE_WIDTH, shape="spline", smoothing=0.6),
        marker=dict(color=s.color, size=5),
        text=[tooltip_text(s.name, d, c) for d, c in zip(pts["date"], pts["change"])],
        hovertemplate="<b>%{fullData.name}</b><br>%{text}<extra></extra>",
        # after a click, every other point fades back
        selected=dict(marker=dict(size=9, opacity=1.0)),
        unselected=dict(marker=dict(opacity=UNSELECTED_OPACITY)),
    )


def build_figure(state: ChartState) -> go.Figure:
    layout = state.layout
    fig = go.Figure()
    for s in state.series:
        fig.add_trace(series_trace(s))

    fig.add_hline(y=0, line_color="#222222", line_width=1)
    if state.headline_latest is not None:
        fig.add_hline(
            y=state.headline_latest,
            line_dash="dash",
            line_color="#222222",
            line_width=1,
            annotation_text=headline_label(state.headline_latest),
            annotation_position="top left",
        )

    apply_plotly_classic(fig)
    fig.update_layout(
        title=state.title,
        width=layout.width,
        height=layout.height,
        autosize=False,
        margin=dict(l=layout.left, r=layout.right, t=layout.top, b=layout.bottom, pad=0),
        legend=dict(itemclick="toggle", itemdoubleclick="toggleothers"),
    )
    fig.update_xaxes(
        range=list(state.x_scale.domain),
        tickvals=state.x_ticks,
        ticktext=state.x_labels,
    )
    fig.update_yaxes(
        range=list(state.y_scale.domain),
        tickvals=state.y_ticks,
        ticktext=state.y_labels,
    )
    return fig
