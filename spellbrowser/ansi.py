"""Width-aware helpers for styled terminal text.

Pane borders only line up when every row is exactly as wide as its pane, so
all measuring here skips SGR escape sequences and counts wide characters as
two columns.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Columns taken by ``ch`` when drawn at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def _segments(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(piece, is_escape)`` pairs; plain text comes one character at a time."""
    pos = 0
    while pos < len(text):
        if text[pos] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, pos)
            if match:
                yield match.group(0), True
                pos = match.end()
                continue
        yield text[pos], False
        pos += 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    col = 0
    for piece, is_escape in _segments(text):
        if not is_escape:
            col += char_display_width(piece, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` down to ``max_cols`` columns, keeping escapes that precede the cut.

    Tabs become spaces. A wide character that would straddle the limit is
    dropped whole.
    """
    if max_cols <= 0:
        return ""
    kept: list[str] = []
    col = 0
    for piece, is_escape in _segments(text):
        if is_escape:
            kept.append(piece)
            continue
        if col >= max_cols:
            break
        width = char_display_width(piece, col)
        if col + width > max_cols:
            break
        kept.append(" " * width if piece == "\t" else piece)
        col += width
    return "".join(kept)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip or space-pad ``text`` to exactly ``width`` columns."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def wrap_words(text: str, width: int) -> list[str]:
    """Word-wrap plain text to ``width`` columns.

    Newlines start a new line and blank lines are kept, so paragraphs stay
    apart. A word wider than ``width`` is split across lines.
    """
    if width <= 0:
        return [""]

    wrapped: list[str] = []
    for paragraph in text.splitlines() or [""]:
        line = ""
        for word in paragraph.split():
            while display_width(word) > width:
                if line:
                    wrapped.append(line)
                    line = ""
                head = clip_ansi_line(word, width) or word[0]
                wrapped.append(head)
                word = word[len(head) :]
            if not word:
                continue
            candidate = f"{line} {word}" if line else word
            if display_width(candidate) > width:
                wrapped.append(line)
                line = word
            else:
                line = candidate
        wrapped.append(line)
    return wrapped
