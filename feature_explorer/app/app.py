"""Dash app factory and server-side state."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import partial
from typing import List

from loguru import logger

from ..bounds import AxisBounds, compute_bounds
from ..categories import DEFAULT_CATALOG, CategoryCatalog
from ..config import ExplorerSettings
from ..records import PointRecord
from ..visualization.emphasis import VisualAttributes, compute_visual_attributes


@dataclass
class ServerState:
    """Server-side data shared by every page mount.

    Only the dataset and what derives from it live here.  Selection and the
    click warm-up flag are per mount and travel through ``dcc.Store``s.
    """

    points: List[PointRecord]
    catalog: CategoryCatalog = DEFAULT_CATALOG
    settings: ExplorerSettings = field(default_factory=ExplorerSettings)
    bounds: AxisBounds | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.set_points(self.points)

    def set_points(self, points: List[PointRecord]) -> None:
        """Replace the point list and recompute everything derived from it."""
        self.points = list(points)
        self.bounds = compute_bounds(self.points, self.settings.axis_padding)
        logger.debug("Dataset set to {} point(s), bounds {}", len(self.points), self.bounds)

    def point_at(self, position: int | None) -> PointRecord | None:
        """Point at array *position*, or None when it does not resolve."""
        if position is None or not 0 <= position < len(self.points):
            return None
        return self.points[position]

    def visual_attributes(self, selected_category: int | None) -> VisualAttributes:
        return compute_visual_attributes(
            self.points,
            selected_category,
            self.catalog.ids,
        )


# Module-level singleton — set by create_app()
state: ServerState | None = None


def create_app(
    points: List[PointRecord],
    settings: ExplorerSettings | None = None,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
) -> "dash.Dash":
    """Create and configure the Dash application.

    Parameters
    ----------
    points : list[PointRecord]
        Normalized feature points (may be empty; the app then shows its
        "no data" state).
    settings : ExplorerSettings, optional
        Runtime settings; defaults are read from the environment.
    catalog : CategoryCatalog
        Categories offered in the selector.

    Returns
    -------
    dash.Dash
    """
    import dash

    from .layout import build_layout
    from . import callbacks

    global state
    state = ServerState(
        points=points,
        catalog=catalog,
        settings=settings or ExplorerSettings(),
    )
    logger.info(
        "Creating app with {} point(s) and {} categories",
        len(state.points), len(catalog),
    )

    assets_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")

    app = dash.Dash(
        __name__,
        assets_folder=assets_dir,
        suppress_callback_exceptions=True,
        title="SAE-Rad Feature Visualization",
    )
    # Built on every page load so each mount starts with a fresh selection
    app.layout = partial(build_layout, state)
    callbacks.register(app)

    return app
