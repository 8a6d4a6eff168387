"""Session context: the single owner of all UI-visible state.

Worker threads only call ``post``. Everything else, including applying posted
events, runs on the UI loop thread, so catalog, query, selection, focus and
status text are never mutated concurrently.
"""

from __future__ import annotations

import logging
from queue import Empty, Queue

from ..catalog.types import Catalog
from ..focus import FocusController
from ..input.dispatcher import InputDispatcher
from ..search.filtering import recompute
from ..state import SessionState
from ..ui_theme import DEFAULT_THEME, UITheme
from .events import CatalogLoaded, SessionEvent, StatusPosted

logger = logging.getLogger(__name__)


class Session:
    """Bind session state to its focus machine, key dispatcher, and event queue."""

    def __init__(self, state: SessionState | None = None, theme: UITheme = DEFAULT_THEME) -> None:
        self.state = state if state is not None else SessionState()
        self.theme = theme
        self.focus = FocusController(self.state)
        self.dispatcher = InputDispatcher(self.state, self.focus, self.refresh_rows)
        self._events: Queue[SessionEvent] = Queue()
        self.focus.focus_list()

    def post(self, event: SessionEvent) -> None:
        """Queue an event for the UI loop. Safe to call from any thread."""
        self._events.put(event)

    def drain_events(self, timeout_seconds: float = 0.0) -> int:
        """Apply every queued event in arrival order; return how many were applied."""
        applied = 0
        if timeout_seconds > 0:
            try:
                first = self._events.get(timeout=timeout_seconds)
            except Empty:
                return 0
            self.apply(first)
            applied += 1
        while True:
            try:
                event = self._events.get_nowait()
            except Empty:
                return applied
            self.apply(event)
            applied += 1

    def apply(self, event: SessionEvent) -> None:
        if isinstance(event, CatalogLoaded):
            self.set_catalog(event.catalog)
        elif isinstance(event, StatusPosted):
            self.set_status(event.text)
        else:
            raise TypeError(f"unsupported session event: {event!r}")

    def set_catalog(self, catalog: Catalog) -> None:
        self.state.catalog = tuple(catalog)
        logger.info("catalog replaced with %d spells", len(self.state.catalog))
        self.refresh_rows()
        self.state.dirty = True

    def set_status(self, text: str) -> None:
        self.state.status_bar.text = text
        self.state.dirty = True

    def resize_list(self, inner_width: int) -> None:
        """Rebuild rows when the list width changes, since flags depend on it."""
        if inner_width == self.state.list_width:
            return
        self.state.list_width = inner_width
        self.refresh_rows()
        self.state.dirty = True

    def refresh_rows(self) -> None:
        """Recompute visible rows from the current catalog and query."""
        state = self.state
        rows = recompute(
            state.catalog,
            state.query,
            state.list_width,
            match_start=self.theme.match_start,
            match_end=self.theme.match_end,
        )
        state.list_pane.set_rows(rows)
