"""Widget-layer surfaces driven by the session.

Each surface only holds display state. Rendering lives in
``spellbrowser.render`` and every mutation happens on the UI loop thread.
"""

from __future__ import annotations

from collections.abc import Callable

from .catalog.types import Spell
from .search.filtering import VisibleRow


class ListPane:
    """Selectable list of visible rows."""

    def __init__(self) -> None:
        self.rows: list[VisibleRow] = []
        self.emphasized = False
        self.start = 0
        self._current = 0

    @property
    def item_count(self) -> int:
        return len(self.rows)

    @property
    def current_index(self) -> int:
        return self._current

    @current_index.setter
    def current_index(self, index: int) -> None:
        if not self.rows:
            self._current = 0
            return
        self._current = max(0, min(index, len(self.rows) - 1))

    def clear(self) -> None:
        self.rows = []
        self._current = 0
        self.start = 0

    def add_row(self, row: VisibleRow) -> None:
        self.rows.append(row)

    def set_rows(self, rows: list[VisibleRow]) -> None:
        """Replace all rows, keeping the selection when it is still in range."""
        previous = self._current
        self.rows = list(rows)
        self._current = previous if previous < len(self.rows) else 0

    def current_row(self) -> VisibleRow | None:
        if not self.rows:
            return None
        return self.rows[self._current]

    def scroll_into_view(self, height: int) -> None:
        """Adjust ``start`` so the selected row is inside a ``height``-row viewport."""
        height = max(1, height)
        if self._current < self.start:
            self.start = self._current
        elif self._current >= self.start + height:
            self.start = self._current - height + 1
        self.start = max(0, min(self.start, max(0, len(self.rows) - height)))


class QueryInput:
    """Single-line text field with a change callback."""

    def __init__(self, label: str = ">>> ") -> None:
        self.label = label
        self.on_change: Callable[[str], None] | None = None
        self._text = ""
        self.cursor = 0

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the text, move the cursor to the end, and notify listeners."""
        self._text = text
        self.cursor = len(text)
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self._text)

    def _edit(self, text: str, cursor: int) -> None:
        self.cursor = cursor
        if text == self._text:
            return
        self._text = text
        self._changed()

    def handle_key(self, key: str) -> bool:
        """Apply default editing for ``key``; return whether it was consumed."""
        if key == "BACKSPACE":
            if self.cursor > 0:
                self._edit(self._text[: self.cursor - 1] + self._text[self.cursor :], self.cursor - 1)
            return True
        if key == "DELETE":
            self._edit(self._text[: self.cursor] + self._text[self.cursor + 1 :], self.cursor)
            return True
        if key == "CTRL_U":
            self._edit(self._text[self.cursor :], 0)
            return True
        if key == "LEFT":
            self.cursor = max(0, self.cursor - 1)
            return True
        if key == "RIGHT":
            self.cursor = min(len(self._text), self.cursor + 1)
            return True
        if key in {"HOME", "CTRL_A"}:
            self.cursor = 0
            return True
        if key in {"END", "CTRL_E"}:
            self.cursor = len(self._text)
            return True
        if len(key) == 1 and key.isprintable():
            self._edit(self._text[: self.cursor] + key + self._text[self.cursor :], self.cursor + 1)
            return True
        return False


class DetailPane:
    """Scrollable view of one spell."""

    def __init__(self) -> None:
        self.spell: Spell | None = None
        self.emphasized = False
        self.start = 0
        self.max_start = 0

    def set_spell(self, spell: Spell) -> None:
        self.spell = spell
        self.start = 0

    def scroll_up(self) -> None:
        self.start = max(0, self.start - 1)

    def scroll_down(self) -> None:
        self.start = min(self.max_start, self.start + 1)

    def set_content_height(self, total_lines: int, visible_rows: int) -> None:
        """Record content size so scrolling stops at the last full page."""
        self.max_start = max(0, total_lines - max(1, visible_rows))
        self.start = min(self.start, self.max_start)


class StatusBar:
    """Read-only status text."""

    def __init__(self) -> None:
        self.text = ""
