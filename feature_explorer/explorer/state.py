"""Selection state and the pure transition function behind the UI.

Keeping the state immutable and separate from the Dash callbacks makes it
easy to test and to drive from a different frontend.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Union


@dataclass(frozen=True)
class SelectionState:
    """What the user is looking at.

    ``selected_point`` is the array position of the point inside the loaded
    point list.  Point and category selection are independent.
    """

    phase: Literal["loading", "ready"] = "loading"
    selected_category: int | None = None
    selected_point: int | None = None
    clicks_enabled: bool = False


@dataclass(frozen=True)
class DatasetLoaded:
    n_points: int


@dataclass(frozen=True)
class RendererReady:
    pass


@dataclass(frozen=True)
class PointClicked:
    position: int | None


@dataclass(frozen=True)
class DismissPoint:
    pass


@dataclass(frozen=True)
class CategoryChosen:
    category_id: int | None


Event = Union[DatasetLoaded, RendererReady, PointClicked, DismissPoint, CategoryChosen]


def reduce(
    state: SelectionState,
    event: Event,
    n_points: int | None = None,
) -> SelectionState:
    """Apply *event* to *state* and return the new state.

    Parameters
    ----------
    state : SelectionState
        Current state; never modified.
    event : Event
        One of the event dataclasses above.
    n_points : int, optional
        Length of the point list, used to validate click positions.  When
        ``None`` any non-negative position is accepted.

    Returns
    -------
    SelectionState
        The same object when the event is a no-op.
    """
    if isinstance(event, DatasetLoaded):
        if state.phase == "ready":
            return state
        return replace(state, phase="ready")

    if isinstance(event, RendererReady):
        if state.clicks_enabled:
            return state
        return replace(state, clicks_enabled=True)

    if isinstance(event, PointClicked):
        pos = event.position
        if not state.clicks_enabled or pos is None or isinstance(pos, bool):
            return state
        if pos < 0 or (n_points is not None and pos >= n_points):
            return state
        return replace(state, selected_point=pos)

    if isinstance(event, DismissPoint):
        if state.selected_point is None:
            return state
        return replace(state, selected_point=None)

    if isinstance(event, CategoryChosen):
        if event.category_id == state.selected_category:
            new_category = None
        else:
            new_category = event.category_id
        if new_category == state.selected_category:
            return state
        return replace(state, selected_category=new_category)

    raise TypeError(f"Unknown event {event!r}")

