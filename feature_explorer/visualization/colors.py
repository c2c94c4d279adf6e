"""Colour helpers for point fills and outlines."""

from __future__ import annotations

from matplotlib import colors as mcolors


def darken(color: str, amount: float = 0.5) -> str:
    """Return *color* with each RGB channel scaled by ``1 - amount``.

    ``amount=0.5`` gives a colour 50% darker; the result is a lowercase
    ``#rrggbb`` string.  Unparseable colours fall back to black.
    """
    amount = min(max(amount, 0.0), 1.0)
    try:
        r, g, b = mcolors.to_rgb(color)
    except ValueError:
        return "#000000"
    factor = 1.0 - amount
    return mcolors.to_hex((r * factor, g * factor, b * factor))
