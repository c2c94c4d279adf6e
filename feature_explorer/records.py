"""Typed records for normalized feature points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .text import DEFAULT_WRAP_WIDTH, wrap_text


@dataclass(frozen=True)
class PointRecord:
    """One learned feature placed in the 2-D embedding space.

    ``index`` is the feature id taken from the source document key.  The
    position of a record inside the loaded point list is a separate thing:
    plot events refer to that position, not to ``index``.
    """

    index: int
    x: float
    y: float
    description: str = ""
    labels: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def wrapped_description(self) -> str:
        return wrap_text(self.description, DEFAULT_WRAP_WIDTH)

    def wrapped(self, max_line_length: int) -> str:
        """Description wrapped to a custom line budget."""
        return wrap_text(self.description, max_line_length)
