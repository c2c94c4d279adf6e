"""All Dash callbacks for the feature explorer app.

Selection lives in per-mount ``dcc.Store``s (``category-store``,
``point-store``, ``clicks-enabled``).  Each callback rebuilds a
:class:`SelectionState` from them, applies one event through
:func:`reduce` and writes back only the store it owns.
"""

from __future__ import annotations

from dash import ALL, Input, Output, State, callback_context, html, no_update
from dash.exceptions import PreventUpdate
from loguru import logger

from ..categories import CategoryCatalog
from ..config import ExplorerSettings
from ..explorer.state import (
    CategoryChosen,
    DismissPoint,
    PointClicked,
    RendererReady,
    SelectionState,
    reduce,
)
from ..io import load_points
from ..records import PointRecord
from .figures import build_main_figure
from .layout import HIDDEN, SHOWN

# Max display length for category names on chips
_MAX_CATEGORY_LEN = 24


def _trunc(text: str, maxlen: int = _MAX_CATEGORY_LEN) -> str:
    """Truncate text with ellipsis if too long."""
    s = str(text)
    return s[:maxlen - 2] + ".." if len(s) > maxlen else s


def click_position(click_data: dict | None) -> int | None:
    """Array position of the clicked point in a Plotly ``clickData`` payload."""
    if not click_data:
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    point = points[0]
    pos = point.get("pointIndex", point.get("pointNumber"))
    return pos if isinstance(pos, int) else None


def session_selection(
    n_points: int,
    selected_category: int | None = None,
    selected_point: int | None = None,
    clicks_enabled: bool | None = False,
) -> SelectionState:
    """Rebuild one mount's selection from its store values."""
    return SelectionState(
        phase="ready" if n_points else "loading",
        selected_category=selected_category,
        selected_point=selected_point,
        clicks_enabled=bool(clicks_enabled),
    )


def status_text(n_points: int, selected_category: int | None, catalog: CategoryCatalog) -> str:
    if n_points == 0:
        return "No features loaded"
    status = f"{n_points:,} features loaded"
    name = catalog.name_of(selected_category)
    if name:
        status += f" · highlighting {name}"
    return status


def category_button_class(category_id: int, selected: int | None) -> str:
    return "category-btn" + (" category-btn-active" if category_id == selected else "")


def detail_children(
    point: PointRecord,
    catalog: CategoryCatalog,
    settings: ExplorerSettings,
) -> list:
    """Description, valid category chips and the highest-activating image."""
    names = catalog.names_for(point.labels)
    if names:
        chips = [html.Span(_trunc(n), className="category-chip", title=n) for n in names]
    else:
        chips = [html.Span("No categories", className="category-chip-empty")]

    return [
        html.Div(
            children=[
                html.P(point.description, className="detail-description"),
                html.Div(chips, className="category-chips"),
            ],
        ),
        html.Div(
            children=html.Img(
                src=settings.image_url(point.index),
                alt=f"Highest activating image for feature {point.index}",
                className="detail-image",
            ),
        ),
    ]


def register(app):
    """Register all callbacks on the Dash app instance."""

    # ------------------------------------------------------------------ #
    #  Main figure update
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("feature-graph", "figure"),
        Output("feature-graph", "style"),
        Output("empty-state", "style"),
        Output("status-bar", "children"),
        Output("warmup-timer", "n_intervals"),
        Output("warmup-timer", "disabled"),
        Input("category-store", "data"),
        Input("figure-trigger", "data"),
    )
    def update_figure(selected_category, figure_trigger):
        from .app import state
        if state is None:
            raise PreventUpdate

        attributes = state.visual_attributes(selected_category)
        fig = build_main_figure(
            state.points,
            attributes,
            state.bounds,
            point_size=state.settings.point_size,
            wrap_width=state.settings.wrap_width,
        )
        status = status_text(len(state.points), selected_category, state.catalog)

        if state.bounds is None:
            return fig, HIDDEN, SHOWN, status, 0, True

        # Each redraw restarts the one-shot warm-up timer
        return fig, {"width": "100%"}, HIDDEN, status, 0, False

    # ------------------------------------------------------------------ #
    #  Warm-up → enable clicks
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("clicks-enabled", "data"),
        Input("warmup-timer", "n_intervals"),
        State("clicks-enabled", "data"),
        prevent_initial_call=True,
    )
    def enable_clicks(n_intervals, clicks_enabled):
        from .app import state
        if state is None or not n_intervals:
            raise PreventUpdate

        before = session_selection(len(state.points), clicks_enabled=clicks_enabled)
        if reduce(before, RendererReady()) is before:
            raise PreventUpdate
        logger.debug("Plot clicks enabled")
        return True

    # ------------------------------------------------------------------ #
    #  Click → detail panel / Close
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("detail-panel", "style"),
        Output("detail-title", "children"),
        Output("detail-content", "children"),
        Output("point-store", "data"),
        Output("feature-graph", "clickData"),
        Input("feature-graph", "clickData"),
        Input("detail-close-btn", "n_clicks"),
        State("clicks-enabled", "data"),
        State("point-store", "data"),
        prevent_initial_call=True,
    )
    def on_point_selection(click_data, close_clicks, clicks_enabled, selected_point):
        from .app import state
        if state is None:
            raise PreventUpdate

        ctx = callback_context
        if not ctx.triggered:
            raise PreventUpdate
        trigger_id = ctx.triggered[0]["prop_id"].split(".")[0]

        if trigger_id == "detail-close-btn":
            event = DismissPoint()
        elif click_data is None:
            # our own clickData reset
            raise PreventUpdate
        else:
            event = PointClicked(click_position(click_data))

        n_points = len(state.points)
        before = session_selection(
            n_points,
            selected_point=selected_point,
            clicks_enabled=clicks_enabled,
        )
        after = reduce(before, event, n_points=n_points)

        # clickData is always cleared so the same point can fire again
        if after is before:
            return no_update, no_update, no_update, no_update, None

        point = state.point_at(after.selected_point)
        if point is None:
            return HIDDEN, no_update, no_update, None, None
        return (
            SHOWN,
            f"Feature {point.index}",
            detail_children(point, state.catalog, state.settings),
            after.selected_point,
            None,
        )

    # ------------------------------------------------------------------ #
    #  Category modal visibility
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("category-modal", "style"),
        Input("category-open-btn", "n_clicks"),
        Input("category-modal-close", "n_clicks"),
        Input({"type": "category-btn", "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_category_modal(open_clicks, close_clicks, category_clicks):
        ctx = callback_context
        if not ctx.triggered or not ctx.triggered[0]["value"]:
            raise PreventUpdate
        if ctx.triggered_id == "category-open-btn":
            return SHOWN
        return HIDDEN

    # ------------------------------------------------------------------ #
    #  Category selection
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("category-store", "data"),
        Output("category-pill", "style"),
        Output("category-pill-name", "children"),
        Output("category-open-btn", "style"),
        Output({"type": "category-btn", "index": ALL}, "className"),
        Input({"type": "category-btn", "index": ALL}, "n_clicks"),
        Input("category-clear-btn", "n_clicks"),
        State({"type": "category-btn", "index": ALL}, "id"),
        State("category-store", "data"),
        prevent_initial_call=True,
    )
    def select_category(category_clicks, clear_clicks, button_ids, current):
        from .app import state
        if state is None:
            raise PreventUpdate

        ctx = callback_context
        if not ctx.triggered or not ctx.triggered[0]["value"]:
            raise PreventUpdate

        trigger = ctx.triggered_id
        chosen = None if trigger == "category-clear-btn" else trigger["index"]
        before = session_selection(len(state.points), selected_category=current)
        selected = reduce(before, CategoryChosen(chosen)).selected_category

        logger.debug("Category choice {} -> selected {}", chosen, selected)
        classes = [category_button_class(b["index"], selected) for b in button_ids]

        if selected is None:
            return None, HIDDEN, "", {"display": "inline-block"}, classes
        return (
            selected,
            {"display": "inline-flex"},
            state.catalog.name_of(selected),
            HIDDEN,
            classes,
        )

    # ------------------------------------------------------------------ #
    #  Reload dataset
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("figure-trigger", "data"),
        Output("detail-panel", "style", allow_duplicate=True),
        Output("point-store", "data", allow_duplicate=True),
        Input("reload-btn", "n_clicks"),
        State("figure-trigger", "data"),
        prevent_initial_call=True,
    )
    def reload_data(n_clicks, trigger):
        from .app import state
        if state is None or not n_clicks:
            raise PreventUpdate

        settings = state.settings
        points = load_points(settings.data_source, timeout=settings.fetch_timeout)
        state.set_points(points)
        return (trigger or 0) + 1, HIDDEN, None
