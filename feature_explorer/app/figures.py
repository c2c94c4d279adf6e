"""Build the feature scatter figure from points and visual attributes."""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from ..bounds import AxisBounds
from ..records import PointRecord
from ..visualization.emphasis import VisualAttributes
from . import theme


def build_main_figure(
    points: Sequence[PointRecord],
    attributes: VisualAttributes,
    bounds: AxisBounds | None,
    *,
    point_size: int = 6,
    wrap_width: int = 50,
) -> go.Figure:
    """Build the feature-embedding figure.

    Parameters
    ----------
    points : Sequence[PointRecord]
        Loaded points, in list order.
    attributes : VisualAttributes
        Per-point colours/opacities aligned with *points*.
    bounds : AxisBounds or None
        Padded axis ranges; ``None`` yields an empty placeholder figure.
    point_size : int
        Marker size in px.
    wrap_width : int
        Line budget for hover text.

    Returns
    -------
    go.Figure
    """
    fig = go.Figure()

    if bounds is None or not points:
        fig.update_layout(_base_layout(None))
        return fig

    fig.add_trace(go.Scattergl(
        x=[p.x for p in points],
        y=[p.y for p in points],
        mode="markers",
        name="Features",
        showlegend=False,
        marker=dict(
            size=point_size,
            color=attributes.colors,
            opacity=attributes.opacities,
            line=dict(
                color=attributes.border_colors,
                width=attributes.border_widths,
            ),
        ),
        text=[p.wrapped(wrap_width) for p in points],
        hoverinfo="text",
        hoverlabel=dict(
            bgcolor=theme.WHITE,
            bordercolor=theme.SKY,
            font=dict(family=theme.FONT_STACK, size=13),
            align="left",
        ),
        ids=[str(i) for i in range(len(points))],
    ))

    fig.update_layout(_base_layout(bounds))
    return fig


def _axis(value_range: list[float] | None) -> dict:
    axis = dict(
        gridcolor=theme.GRID,
        showgrid=True,
        zeroline=False,
        linecolor=theme.AXIS_LINE,
        tickfont=dict(size=12, color=theme.SLATE_500),
        # constant uirevision keeps zoom/pan across category changes
        uirevision="constant",
    )
    if value_range is None:
        axis.update(visible=False)
    else:
        axis.update(range=value_range)
    return axis


def _base_layout(bounds: AxisBounds | None) -> dict:
    """Return common layout kwargs."""
    return dict(
        autosize=True,
        height=theme.PLOT_HEIGHT,
        margin=dict(l=50, r=50, t=30, b=50),
        xaxis=_axis(bounds.x_range if bounds else None),
        yaxis=_axis(bounds.y_range if bounds else None),
        showlegend=False,
        plot_bgcolor=theme.WHITE,
        paper_bgcolor=theme.WHITE,
        hovermode="closest",
        font=dict(family=theme.FONT_STACK, size=12, color=theme.SLATE_700),
        modebar=dict(
            bgcolor="rgba(0,0,0,0)",
            color=theme.SLATE_400,
            activecolor=theme.SKY,
        ),
    )
