"""Focus ownership between the list pane and the detail pane.

The query input always receives text; focus only decides which pane owns
the navigation keys and which pane border is emphasized.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import SessionState


class Focus(enum.Enum):
    LIST = "list"
    DETAIL = "detail"


class FocusController:
    """Two-state focus machine with pane emphasis side effects."""

    def __init__(self, state: SessionState) -> None:
        self.state = state

    @property
    def focus(self) -> Focus:
        return self.state.focus

    def _enter(self, focus: Focus) -> None:
        state = self.state
        state.list_pane.emphasized = focus is Focus.LIST
        state.detail_pane.emphasized = focus is Focus.DETAIL
        state.focus = focus
        state.dirty = True

    def focus_list(self) -> None:
        self._enter(Focus.LIST)

    def focus_detail(self) -> None:
        self._enter(Focus.DETAIL)

    def toggle_focus(self) -> None:
        if self.state.focus is Focus.DETAIL:
            self.focus_list()
        else:
            self.focus_detail()
