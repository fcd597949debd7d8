"""Terminal styling for rendered timelines."""

from __future__ import annotations

import re
from typing import Iterable

from rich.text import Text

_LEVEL_STYLES = {
    "L0": "#ffcc66",
    "L1": "#5fd7ff",
    "L2": "#87d787",
}
_HEADER_PATTERN = re.compile(r"^L\d(, all files -?\d+b)? *$")
_BAR_PATTERN = re.compile(r"\|-*(L\d)\.\d+-*\|")


def style_line(line: str) -> Text:
    """Return a styled copy of one timeline line; the plain text is unchanged."""
    text = Text(line)
    if _HEADER_PATTERN.match(line):
        text.stylize("bold", 0, len(line.rstrip()))
        return text
    for match in _BAR_PATTERN.finditer(line):
        style = _LEVEL_STYLES.get(match.group(1), "")
        text.stylize(style, match.start(), match.end())
    return text


def style_lines(lines: Iterable[str]) -> Text:
    """Join rendered lines into one styled Text block."""
    return Text("\n").join(style_line(line) for line in lines)
