"""Padded axis ranges for the scatter plot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .records import PointRecord

DEFAULT_PADDING = 5.0


@dataclass(frozen=True)
class AxisBounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x_range(self) -> list[float]:
        return [self.x_min, self.x_max]

    @property
    def y_range(self) -> list[float]:
        return [self.y_min, self.y_max]


def compute_bounds(
    points: Sequence[PointRecord],
    padding: float = DEFAULT_PADDING,
) -> AxisBounds | None:
    """Bounding box of *points* grown by *padding* on every side.

    Returns ``None`` for an empty list; axes should not be drawn until
    bounds exist.
    """
    if not points:
        return None

    xy = np.array([(p.x, p.y) for p in points], dtype=float)
    x_min, y_min = xy.min(axis=0)
    x_max, y_max = xy.max(axis=0)
    return AxisBounds(
        x_min=float(x_min) - padding,
        x_max=float(x_max) + padding,
        y_min=float(y_min) - padding,
        y_max=float(y_max) + padding,
    )
