"""Rendering engine for the list/detail terminal view.

Defines render context data and composes full ANSI frames. Frame composition
is pure; ``render_frame`` is the only function that writes to the terminal.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from ..ansi import clip_ansi_line, display_width, fit_ansi_line
from ..runtime.layout import ScreenLayout
from ..search.filtering import VisibleRow
from ..ui_theme import DEFAULT_THEME, UITheme
from .detail import spell_detail_lines

__all__ = [
    "RenderContext",
    "box_bottom",
    "box_top",
    "build_frame",
    "build_status_line",
    "render_frame",
    "selected_with_ansi",
    "spell_detail_lines",
]


@dataclass
class RenderContext:
    layout: ScreenLayout
    rows: list[VisibleRow]
    list_start: int
    selected: int
    list_focused: bool
    detail_lines: list[str]
    detail_start: int
    detail_focused: bool
    query: str = ""
    query_cursor: int = 0
    query_label: str = ">>> "
    status_text: str = ""
    catalog_size: int = 0
    theme: UITheme = field(default=DEFAULT_THEME)


def selected_with_ansi(text: str) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return "\033[7m" + text.replace("\033[0m", "\033[0;7m") + "\033[0m"


def box_top(title: str, width: int, focused: bool, theme: UITheme) -> str:
    """Top border with an inline title, e.g. ``┌ Spells ───┐``."""
    if width < 2:
        return "─" * max(0, width)
    border = theme.border_focused if focused else theme.border
    title_style = theme.title_focused if focused else theme.title
    inner = width - 2
    label = clip_ansi_line(f" {title} ", max(0, inner - 1)) if title else ""
    fill = "─" * max(0, inner - 1 - display_width(label)) if label else "─" * inner
    lead = "─" if label else ""
    return f"{border}┌{lead}{theme.reset}{title_style}{label}{theme.reset}{border}{fill}┐{theme.reset}"


def box_bottom(width: int, focused: bool, theme: UITheme) -> str:
    if width < 2:
        return "─" * max(0, width)
    border = theme.border_focused if focused else theme.border
    return f"{border}└{'─' * (width - 2)}┘{theme.reset}"


def _box_row(content: str, width: int, focused: bool, theme: UITheme) -> str:
    if width < 2:
        return " " * max(0, width)
    border = theme.border_focused if focused else theme.border
    body = fit_ansi_line(content, width - 2)
    return f"{border}│{theme.reset}{body}{theme.reset}{border}│{theme.reset}"


def build_status_line(text: str, width: int) -> str:
    """Right-align status text inside ``width`` columns, clipping from the left."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return " " * (width - display_width(text)) + text
    return text[-width:]


def _list_title(context: RenderContext) -> str:
    shown = len(context.rows)
    if context.catalog_size and shown != context.catalog_size:
        return f"Spells {shown}/{context.catalog_size}"
    return f"Spells {shown}" if shown else "Spells"


def _list_body(context: RenderContext) -> list[str]:
    layout = context.layout
    theme = context.theme
    body: list[str] = []
    if not context.rows:
        hint = "no matches" if context.catalog_size else "loading..."
        body.append(f"{theme.placeholder}{hint}{theme.reset}")
        return body
    end = min(len(context.rows), context.list_start + layout.inner_rows)
    for idx in range(context.list_start, end):
        label = fit_ansi_line(context.rows[idx].label, layout.list_inner_width)
        if idx == context.selected:
            label = selected_with_ansi(label)
        body.append(label)
    return body


def _query_line(context: RenderContext) -> str:
    theme = context.theme
    width = context.layout.list_width
    query = context.query
    cursor = max(0, min(context.query_cursor, len(query)))
    before = query[:cursor]
    at = query[cursor] if cursor < len(query) else " "
    after = query[cursor + 1 :]
    text = (
        f"{theme.query_label}{context.query_label}{theme.reset}"
        f"{theme.query_text}{before}{theme.reset}\033[7m{at}\033[0m"
        f"{theme.query_text}{after}{theme.reset}"
    )
    return fit_ansi_line(text, width)


def build_frame(context: RenderContext) -> str:
    """Compose one full frame as a string of ANSI output."""
    layout = context.layout
    theme = context.theme
    list_body = _list_body(context)
    detail_body = context.detail_lines[context.detail_start : context.detail_start + layout.inner_rows]

    out: list[str] = ["\033[H\033[J"]
    for row in range(layout.pane_rows):
        if row == 0:
            out.append(box_top(_list_title(context), layout.list_width, context.list_focused, theme))
            out.append(box_top("Details", layout.detail_width, context.detail_focused, theme))
        elif row == layout.pane_rows - 1:
            out.append(box_bottom(layout.list_width, context.list_focused, theme))
            out.append(box_bottom(layout.detail_width, context.detail_focused, theme))
        else:
            body_idx = row - 1
            list_text = list_body[body_idx] if body_idx < len(list_body) else ""
            detail_text = detail_body[body_idx] if body_idx < len(detail_body) else ""
            out.append(_box_row(list_text, layout.list_width, context.list_focused, theme))
            out.append(_box_row(detail_text, layout.detail_width, context.detail_focused, theme))
        out.append("\r\n")

    out.append(_query_line(context))
    status_width = max(0, layout.columns - layout.list_width - 1)
    status = build_status_line(context.status_text, status_width)
    if status.strip():
        out.append(f"{theme.status}{status}{theme.reset}")
    else:
        out.append(status)
    return "".join(out)


def render_frame(context: RenderContext) -> None:
    frame = build_frame(context)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))
