"""Global key handling for the spell browser.

Every key passes through ``InputDispatcher.handle_key`` before the query input
sees it. The dispatcher never swallows a key: it returns the token so the
widget layer can still apply its default editing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..catalog.types import Spell
from ..errors import SelectionReferenceError
from ..focus import Focus, FocusController
from ..state import SessionState
from .key_registry import KeyBinding, KeyRegistry

logger = logging.getLogger(__name__)

SELECT_KEYS = ("ENTER",)
UP_KEYS = ("UP", "CTRL_K")
DOWN_KEYS = ("DOWN", "CTRL_J")
CLEAR_QUERY_KEYS = ("CTRL_D",)
FOCUS_LIST_KEYS = ("LEFT", "CTRL_H")
FOCUS_DETAIL_KEYS = ("RIGHT", "CTRL_L")
SWITCH_FOCUS_KEYS = ("TAB",)


class InputDispatcher:
    """Route key tokens to selection, scrolling, focus, and query actions."""

    def __init__(
        self,
        state: SessionState,
        focus: FocusController,
        refresh_rows: Callable[[], None],
    ) -> None:
        self.state = state
        self.focus = focus
        self._refresh_rows = refresh_rows
        self._registry = KeyRegistry().register(
            KeyBinding(SELECT_KEYS, self.show_selected_spell),
            KeyBinding(UP_KEYS, self.move_up),
            KeyBinding(DOWN_KEYS, self.move_down),
            KeyBinding(CLEAR_QUERY_KEYS, self.clear_query),
            KeyBinding(FOCUS_LIST_KEYS, focus.focus_list),
            KeyBinding(FOCUS_DETAIL_KEYS, focus.focus_detail),
            KeyBinding(SWITCH_FOCUS_KEYS, focus.toggle_focus),
        )
        state.query_input.on_change = self.on_query_changed

    def handle_key(self, key: str) -> str:
        """Handle one key token and return it for default widget handling."""
        if self.state.status_bar.text:
            self.state.status_bar.text = ""
            self.state.dirty = True
        if self._registry.dispatch(key):
            logger.debug("dispatched %s (focus=%s)", key, self.state.focus.value)
            self.state.dirty = True
        return key

    def on_query_changed(self, text: str) -> None:
        """Text-change handler for the query input."""
        self.focus.focus_list()
        self.state.query = text
        self._refresh_rows()
        self.state.dirty = True

    def current_selected_spell(self) -> Spell | None:
        """Return the spell behind the selected row, or ``None`` for an empty list."""
        row = self.state.list_pane.current_row()
        if row is None:
            return None
        catalog = self.state.catalog
        if not 0 <= row.source_index < len(catalog):
            raise SelectionReferenceError(row.source_index, len(catalog))
        return catalog[row.source_index]

    def show_selected_spell(self) -> None:
        spell = self.current_selected_spell()
        if spell is not None:
            self.state.detail_pane.set_spell(spell)

    def move_up(self) -> None:
        if self.state.focus is Focus.DETAIL:
            self.state.detail_pane.scroll_up()
            return
        pane = self.state.list_pane
        pane.current_index = max(0, pane.current_index - 1)

    def move_down(self) -> None:
        if self.state.focus is Focus.DETAIL:
            self.state.detail_pane.scroll_down()
            return
        pane = self.state.list_pane
        if pane.current_index >= pane.item_count - 1:
            pane.current_index = 0
            return
        pane.current_index = pane.current_index + 1

    def clear_query(self) -> None:
        self.state.query_input.set_text("")
