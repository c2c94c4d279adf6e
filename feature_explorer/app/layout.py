"""Full Dash layout: header, category selector, plot, detail panel.

Every component a callback reads from is always present in the DOM;
visibility is toggled via callbacks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import dcc, html

from ..categories import CategoryCatalog
from . import theme

if TYPE_CHECKING:
    from .app import ServerState

PAPER_URL = "https://openreview.net/pdf?id=ZLAQ6Pjf9y"

HIDDEN = {"display": "none"}
SHOWN = {"display": "block"}


def build_layout(state: ServerState) -> html.Div:
    """Return the complete app layout.

    Called once per page load, so every mount starts with no category, no
    point and clicks disabled.
    """
    n_points = len(state.points)

    return html.Div(
        className="app-container",
        children=[
            # ── Header ──
            html.Div(
                className="page-header",
                children=[
                    html.H1("SAE-Rad Feature Visualization", className="page-title"),
                ],
            ),
            # ── Main card ──
            html.Div(
                className="main-card",
                style={"maxWidth": theme.CONTENT_WIDTH},
                children=[
                    html.Div(
                        className="card-intro",
                        children=[
                            html.P(
                                "Geometry of chest X-ray features extracted by SAE-Rad",
                                className="card-subtitle",
                            ),
                            html.A(
                                "Read our paper",
                                href=PAPER_URL,
                                target="_blank",
                                rel="noopener noreferrer",
                                className="btn-primary",
                            ),
                        ],
                    ),
                    _category_selector(state.catalog),
                    html.Div(
                        className="plot-well",
                        children=[
                            dcc.Loading(
                                id="plot-loading",
                                type="circle",
                                children=[
                                    dcc.Graph(
                                        id="feature-graph",
                                        config={
                                            "displayModeBar": True,
                                            "modeBarButtonsToAdd": [
                                                "zoom2d", "pan2d", "zoomIn2d",
                                                "zoomOut2d", "autoScale2d",
                                                "resetScale2d",
                                            ],
                                            "responsive": True,
                                            "scrollZoom": True,
                                        },
                                        style={"width": "100%"},
                                    ),
                                ],
                            ),
                            html.Div(
                                id="empty-state",
                                className="empty-state",
                                children="No feature data available.",
                                style=HIDDEN,
                            ),
                        ],
                    ),
                    _detail_panel(),
                    html.Div(
                        className="status-row",
                        children=[
                            html.Span(
                                id="status-bar",
                                className="status-bar",
                                children=f"{n_points:,} features loaded",
                            ),
                            html.Button("Reload data", id="reload-btn",
                                        className="btn-link"),
                        ],
                    ),
                ],
            ),
            html.Div(
                className="page-footer",
                children=html.P(
                    "Interactive visualization of SAE features. Each point "
                    "represents a learned feature from the chest X-ray images. "
                    "Zoom, pan, or click points to explore the feature space.",
                ),
            ),
            # ── Hidden stores / timers ──
            # Per-mount selection; the server only holds the dataset
            dcc.Store(id="category-store", data=None),
            dcc.Store(id="point-store", data=None),
            dcc.Store(id="clicks-enabled", data=False),
            dcc.Store(id="figure-trigger", data=0),
            dcc.Interval(
                id="warmup-timer",
                interval=state.settings.warmup_ms,
                n_intervals=0,
                max_intervals=1,
                disabled=True,
            ),
        ],
    )


# ------------------------------------------------------------------ #
#  Category selector
# ------------------------------------------------------------------ #

def _category_selector(catalog: CategoryCatalog) -> html.Div:
    return html.Div(
        className="category-selector",
        children=[
            html.Button(
                "Select Feature Category",
                id="category-open-btn",
                className="category-open-btn",
            ),
            html.Div(
                id="category-pill",
                className="category-pill",
                style=HIDDEN,
                children=[
                    html.Span(id="category-pill-name", className="category-pill-name"),
                    html.Button("x", id="category-clear-btn",
                                className="category-clear-btn",
                                title="Clear category"),
                ],
            ),
            html.Div(
                id="category-modal",
                className="category-modal",
                style=HIDDEN,
                children=[
                    html.Div(
                        className="modal-header",
                        children=[
                            html.H3("Select Feature Category"),
                            html.Button("x", id="category-modal-close",
                                        className="modal-close-btn"),
                        ],
                    ),
                    html.Div(
                        className="category-grid",
                        children=[
                            html.Button(
                                category.name,
                                id={"type": "category-btn", "index": category.id},
                                className="category-btn",
                            )
                            for category in catalog
                        ],
                    ),
                ],
            ),
        ],
    )


# ------------------------------------------------------------------ #
#  Detail panel
# ------------------------------------------------------------------ #

def _detail_panel() -> html.Div:
    return html.Div(
        id="detail-panel",
        className="detail-panel",
        style=HIDDEN,
        children=[
            html.Div(
                className="detail-header",
                children=[
                    html.H3(id="detail-title", className="detail-title"),
                    html.Button("Close", id="detail-close-btn",
                                className="detail-close-btn"),
                ],
            ),
            html.Div(id="detail-content", className="detail-grid"),
        ],
    )
