"""ANSI-aware text measurement and padding utilities.

Listing cells carry color escapes and icon glyphs, so column math must use
display columns rather than ``len``. Escape sequences count as zero columns
and East Asian wide/fullwidth characters count as two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def pad_ansi(text: str, width: int, align: str = "left") -> str:
    """Pad styled ``text`` with spaces to ``width`` display columns.

    Text already at or beyond ``width`` is returned unchanged.
    """
    missing = width - display_width(text)
    if missing <= 0:
        return text
    if align == "right":
        return " " * missing + text
    return text + " " * missing


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "pad_ansi",
]
