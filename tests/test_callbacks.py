"""Drive the registered Dash callbacks the way the renderer would."""

from contextvars import copy_context

import pytest
from dash import no_update
from dash._callback_context import context_value
from dash._utils import AttributeDict
from dash.exceptions import PreventUpdate

from feature_explorer.app import app as app_module
from feature_explorer.app.app import create_app
from feature_explorer.app.layout import HIDDEN, SHOWN
from feature_explorer.config import ExplorerSettings

CLICK = {"points": [{"curveNumber": 0, "pointIndex": 1, "pointNumber": 1}]}
BUTTON_IDS = [{"type": "category-btn", "index": i} for i in (1, 2, 3)]


def _callback(app, name):
    for entry in app.callback_map.values():
        if entry["callback"].__name__ == name:
            return entry["callback"].__wrapped__
    raise KeyError(name)


def _triggered(func, prop_id, value, *args):
    def run():
        context_value.set(AttributeDict(
            triggered_inputs=[{"prop_id": prop_id, "value": value}],
        ))
        return func(*args)
    return copy_context().run(run)


def _category_prop(index):
    return '{"index":%d,"type":"category-btn"}.n_clicks' % index


@pytest.fixture
def app(points, catalog):
    return create_app(points, ExplorerSettings(), catalog)


class TestLayoutMount:

    def test_mount_starts_fresh(self, app):
        layout = app.layout()
        assert layout["clicks-enabled"].data is False
        assert layout["category-store"].data is None
        assert layout["point-store"].data is None
        assert layout["detail-panel"].style == HIDDEN

    def test_each_mount_builds_new_components(self, app):
        assert app.layout() is not app.layout()

    def test_warmup_timer_is_one_shot(self, app):
        timer = app.layout()["warmup-timer"]
        assert timer.max_intervals == 1
        assert timer.disabled is True


class TestWarmup:

    def test_no_tick_does_nothing(self, app):
        with pytest.raises(PreventUpdate):
            _callback(app, "enable_clicks")(0, False)

    def test_tick_enables_clicks(self, app):
        assert _callback(app, "enable_clicks")(1, False) is True

    def test_already_enabled_does_nothing(self, app):
        with pytest.raises(PreventUpdate):
            _callback(app, "enable_clicks")(1, True)


class TestPointSelection:

    def test_click_before_warmup_is_ignored_and_cleared(self, app):
        on_click = _callback(app, "on_point_selection")
        result = _triggered(on_click, "feature-graph.clickData", CLICK,
                            CLICK, None, False, None)
        assert all(r is no_update for r in result[:4])
        assert result[4] is None

    def test_same_click_after_warmup_opens_panel(self, app):
        on_click = _callback(app, "on_point_selection")
        _triggered(on_click, "feature-graph.clickData", CLICK, CLICK, None, False, None)

        style, title, content, point, click_data = _triggered(
            on_click, "feature-graph.clickData", CLICK, CLICK, None, True, None,
        )
        assert style == SHOWN
        assert title == "Feature 11"
        assert len(content) == 2
        assert point == 1
        assert click_data is None

    def test_reclicking_selected_point_still_clears_click(self, app):
        on_click = _callback(app, "on_point_selection")
        result = _triggered(on_click, "feature-graph.clickData", CLICK,
                            CLICK, None, True, 1)
        assert result[4] is None

    def test_cleared_click_does_not_refire(self, app):
        on_click = _callback(app, "on_point_selection")
        with pytest.raises(PreventUpdate):
            _triggered(on_click, "feature-graph.clickData", None, None, None, True, 1)

    def test_out_of_range_click_is_ignored(self, app, points):
        on_click = _callback(app, "on_point_selection")
        far = {"points": [{"pointIndex": len(points)}]}
        result = _triggered(on_click, "feature-graph.clickData", far,
                            far, None, True, None)
        assert all(r is no_update for r in result[:4])

    def test_close_hides_panel_and_clears_point(self, app):
        on_click = _callback(app, "on_point_selection")
        style, _, _, point, click_data = _triggered(
            on_click, "detail-close-btn.n_clicks", 1, None, 1, True, 2,
        )
        assert style == HIDDEN
        assert point is None
        assert click_data is None

    def test_close_without_selection_changes_nothing(self, app):
        on_click = _callback(app, "on_point_selection")
        result = _triggered(on_click, "detail-close-btn.n_clicks", 1,
                            None, 1, True, None)
        assert all(r is no_update for r in result[:4])

    def test_sessions_do_not_share_selection(self, app):
        on_click = _callback(app, "on_point_selection")
        first = _triggered(on_click, "feature-graph.clickData", CLICK,
                           CLICK, None, True, None)
        assert first[3] == 1

        # a second mount still has clicks disabled and no point
        layout = app.layout()
        second = _triggered(on_click, "feature-graph.clickData", CLICK, CLICK, None,
                            layout["clicks-enabled"].data, layout["point-store"].data)
        assert second[3] is no_update
        assert not hasattr(app_module.state, "selection")


class TestCategorySelection:

    def test_choose_then_toggle_off(self, app):
        select = _callback(app, "select_category")
        store, pill, name, open_btn, classes = _triggered(
            select, _category_prop(2), 1, [None, 1, None], None, BUTTON_IDS, None,
        )
        assert store == 2
        assert pill == {"display": "inline-flex"}
        assert name == "COPD"
        assert open_btn == HIDDEN
        assert classes == ["category-btn", "category-btn category-btn-active", "category-btn"]

        store, pill, name, open_btn, classes = _triggered(
            select, _category_prop(2), 2, [None, 2, None], None, BUTTON_IDS, 2,
        )
        assert store is None
        assert pill == HIDDEN
        assert name == ""
        assert open_btn == {"display": "inline-block"}
        assert classes == ["category-btn"] * 3

    def test_clear_button(self, app):
        select = _callback(app, "select_category")
        result = _triggered(select, "category-clear-btn.n_clicks", 1,
                            [None, None, 1], 1, BUTTON_IDS, 3)
        assert result[0] is None

    def test_button_render_without_click_is_ignored(self, app):
        select = _callback(app, "select_category")
        with pytest.raises(PreventUpdate):
            _triggered(select, _category_prop(1), None,
                       [None, None, None], None, BUTTON_IDS, None)

    def test_modal_opens_and_closes(self, app):
        toggle = _callback(app, "toggle_category_modal")
        assert _triggered(toggle, "category-open-btn.n_clicks", 1,
                          1, None, [None] * 3) == SHOWN
        assert _triggered(toggle, _category_prop(3), 1,
                          1, None, [None, None, 1]) == HIDDEN


class TestFigureAndReload:

    def test_figure_uses_session_category(self, app):
        update = _callback(app, "update_figure")
        fig, graph_style, empty_style, status, n_intervals, disabled = update(2, 0)
        assert list(fig.data[0].marker.opacity) == [0.3, 1.0, 0.3, 0.3]
        assert graph_style == {"width": "100%"}
        assert empty_style == HIDDEN
        assert status == "4 features loaded · highlighting COPD"
        assert (n_intervals, disabled) == (0, False)

    def test_empty_dataset_shows_empty_state(self, catalog):
        app = create_app([], ExplorerSettings(), catalog)
        _, graph_style, empty_style, status, _, disabled = _callback(app, "update_figure")(None, 0)
        assert graph_style == HIDDEN
        assert empty_style == SHOWN
        assert status == "No features loaded"
        assert disabled is True

    def test_reload_replaces_points_and_clears_point(self, app, points, monkeypatch):
        monkeypatch.setattr(
            "feature_explorer.app.callbacks.load_points",
            lambda source, timeout: points[:2],
        )
        trigger, panel, point = _callback(app, "reload_data")(1, 3)
        assert (trigger, panel, point) == (4, HIDDEN, None)
        assert app_module.state.points == points[:2]

    def test_reload_without_click_does_nothing(self, app):
        with pytest.raises(PreventUpdate):
            _callback(app, "reload_data")(None, 0)
