from __future__ import annotations

from dataclasses import dataclass, field

from .catalog.types import Catalog
from .focus import Focus
from .search.filtering import VisibleRow
from .widgets import DetailPane, ListPane, QueryInput, StatusBar


@dataclass
class SessionState:
    catalog: Catalog = ()
    query: str = ""
    focus: Focus = Focus.LIST
    list_width: int = 24
    list_pane: ListPane = field(default_factory=ListPane)
    query_input: QueryInput = field(default_factory=QueryInput)
    detail_pane: DetailPane = field(default_factory=DetailPane)
    status_bar: StatusBar = field(default_factory=StatusBar)
    dirty: bool = True

    @property
    def visible_rows(self) -> list[VisibleRow]:
        return self.list_pane.rows

    @property
    def selection(self) -> int:
        return self.list_pane.current_index

    @property
    def status_text(self) -> str:
        return self.status_bar.text
