"""Per-point visual emphasis driven by the active category filter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Sequence, Tuple

from ..records import PointRecord
from .colors import darken


class Emphasis(str, Enum):
    UNFILTERED = "unfiltered"
    HIGHLIGHTED = "highlighted"
    DIMMED = "dimmed"


@dataclass(frozen=True)
class EmphasisStyle:
    """Fill colours, opacities and outline settings per emphasis state."""

    base_color: str = "#0ea5e9"
    highlight_color: str = "#22c55e"
    unfiltered_opacity: float = 0.6
    highlighted_opacity: float = 1.0
    dimmed_opacity: float = 0.3
    border_darken: float = 0.5
    border_width: float = 1.0

    def color_for(self, emphasis: Emphasis) -> str:
        if emphasis is Emphasis.HIGHLIGHTED:
            return self.highlight_color
        return self.base_color

    def opacity_for(self, emphasis: Emphasis) -> float:
        if emphasis is Emphasis.HIGHLIGHTED:
            return self.highlighted_opacity
        if emphasis is Emphasis.DIMMED:
            return self.dimmed_opacity
        return self.unfiltered_opacity


DEFAULT_STYLE = EmphasisStyle()


@dataclass(frozen=True)
class VisualAttributes:
    """Parallel per-point arrays handed to the renderer."""

    emphasis: Tuple[Emphasis, ...] = ()
    colors: Tuple[str, ...] = ()
    opacities: Tuple[float, ...] = ()
    border_colors: Tuple[str, ...] = ()
    border_widths: Tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.emphasis)


def classify_points(
    points: Sequence[PointRecord],
    selected_category: int | None,
    valid_ids: AbstractSet[int],
) -> list[Emphasis]:
    """Emphasis state of every point for the given category filter.

    Only labels present in *valid_ids* take part in the membership test, so
    an unknown label id can never make a point match.
    """
    if selected_category is None:
        return [Emphasis.UNFILTERED] * len(points)
    if selected_category not in valid_ids:
        return [Emphasis.DIMMED] * len(points)

    return [
        Emphasis.HIGHLIGHTED
        if any(label == selected_category for label in p.labels if label in valid_ids)
        else Emphasis.DIMMED
        for p in points
    ]


def compute_visual_attributes(
    points: Sequence[PointRecord],
    selected_category: int | None,
    valid_ids: AbstractSet[int],
    style: EmphasisStyle = DEFAULT_STYLE,
) -> VisualAttributes:
    """Recompute colour, opacity and outline for all points.

    Outlines are always a darkened copy of the point's own fill.
    """
    emphasis = classify_points(points, selected_category, valid_ids)
    borders = {
        color: darken(color, style.border_darken)
        for color in (style.base_color, style.highlight_color)
    }
    colors = tuple(style.color_for(e) for e in emphasis)
    return VisualAttributes(
        emphasis=tuple(emphasis),
        colors=colors,
        opacities=tuple(style.opacity_for(e) for e in emphasis),
        border_colors=tuple(borders[c] for c in colors),
        border_widths=(style.border_width,) * len(emphasis),
    )
