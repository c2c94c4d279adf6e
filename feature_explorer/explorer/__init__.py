"""Interaction state for the feature explorer."""

from .state import (
    CategoryChosen,
    DatasetLoaded,
    DismissPoint,
    PointClicked,
    RendererReady,
    SelectionState,
    reduce,
)

__all__ = [
    "SelectionState",
    "reduce",
    "DatasetLoaded",
    "RendererReady",
    "PointClicked",
    "DismissPoint",
    "CategoryChosen",
]
