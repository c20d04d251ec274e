"""ANSI-aware width measurement, clipping, and padding.

Escape sequences are carried through verbatim and never count toward width.
Tabs expand to 8-column stops, and wide East Asian characters take two cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for ``ch`` placed at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        width = char_display_width(ch, col)
        if col + width > max_cols:
            break
        out.append(" " * width if ch == "\t" else ch)
        col += width
        i += 1
    return "".join(out)


def fit_ansi_line(text: str, cols: int) -> str:
    """Clip then right-pad ``text`` to exactly ``cols`` columns, closing styles."""
    clipped = clip_ansi_line(text, cols)
    padding = " " * max(0, cols - display_width(clipped))
    if "\x1b" in clipped:
        return clipped + RESET + padding
    return clipped + padding


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "char_display_width",
    "display_width",
    "clip_ansi_line",
    "fit_ansi_line",
]
