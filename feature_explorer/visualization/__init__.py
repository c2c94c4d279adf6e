"""Visual attribute computation for the feature scatter plot."""

from .colors import darken
from .emphasis import (
    DEFAULT_STYLE,
    Emphasis,
    EmphasisStyle,
    VisualAttributes,
    classify_points,
    compute_visual_attributes,
)

__all__ = [
    "darken",
    "DEFAULT_STYLE",
    "Emphasis",
    "EmphasisStyle",
    "VisualAttributes",
    "classify_points",
    "compute_visual_attributes",
]
