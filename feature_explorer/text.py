"""Greedy word wrapping for hover labels."""

from __future__ import annotations

DEFAULT_WRAP_WIDTH = 50
LINE_BREAK = "<br>"


def wrap_text(
    text: str,
    max_line_length: int = DEFAULT_WRAP_WIDTH,
    *,
    line_break: str = LINE_BREAK,
) -> str:
    """Reflow *text* into lines of at most *max_line_length* characters.

    Words are accumulated greedily.  Before a word is appended to a non-empty
    line, ``len(line) + len(word)`` is compared against *max_line_length*; if
    it is larger the line is flushed and the word starts a new one.  Words
    longer than the budget are never split, they simply end up on their own
    (over-length) line.

    Parameters
    ----------
    text : str
        Source text.  Runs of whitespace are collapsed.
    max_line_length : int
        Character budget per line.
    line_break : str
        Marker inserted between lines (Plotly hover text uses ``<br>``).

    Returns
    -------
    str
        Wrapped lines joined by *line_break*; ``""`` for empty input.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + len(word) > max_line_length:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return line_break.join(lines)
