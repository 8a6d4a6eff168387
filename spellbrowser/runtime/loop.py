"""Main interactive event loop for the terminal UI.

Each iteration applies queued worker events, re-renders when state is dirty,
then waits briefly for one key and dispatches it. This loop is the only
thread that mutates session state.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass

from ..input import read_key
from ..render import RenderContext, render_frame, spell_detail_lines
from .layout import ScreenLayout, compute_layout
from .session import Session
from .terminal import TerminalController

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"CTRL_C"})


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 120


def build_render_context(session: Session, layout: ScreenLayout) -> RenderContext:
    """Snapshot session state into a render context for ``layout``."""
    state = session.state
    detail_lines = spell_detail_lines(state.detail_pane.spell, layout.detail_inner_width, session.theme)
    state.detail_pane.set_content_height(len(detail_lines), layout.inner_rows)
    state.list_pane.scroll_into_view(layout.inner_rows)
    return RenderContext(
        layout=layout,
        rows=list(state.list_pane.rows),
        list_start=state.list_pane.start,
        selected=state.list_pane.current_index,
        list_focused=state.list_pane.emphasized,
        detail_lines=detail_lines,
        detail_start=state.detail_pane.start,
        detail_focused=state.detail_pane.emphasized,
        query=state.query_input.text,
        query_cursor=state.query_input.cursor,
        query_label=state.query_input.label,
        status_text=state.status_bar.text,
        catalog_size=len(state.catalog),
        theme=session.theme,
    )


def run_main_loop(
    session: Session,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    list_percent: float | None = None,
) -> None:
    """Run the interactive loop until a quit key is read.

    ``SelectionReferenceError`` and other unexpected errors propagate; the
    raw-mode context restores the terminal on the way out.
    """
    state = session.state
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != last_size:
                last_size = (term.columns, term.lines)
                state.dirty = True
            layout = compute_layout(term.columns, term.lines, list_percent)
            session.resize_list(layout.list_inner_width)
            session.drain_events()

            if state.dirty:
                render_frame(build_render_context(session, layout))
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            if key in QUIT_KEYS:
                logger.debug("quit requested")
                break

            forwarded = session.dispatcher.handle_key(key)
            if forwarded:
                state.query_input.handle_key(forwarded)
            state.dirty = True
