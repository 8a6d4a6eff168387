"""Screen geometry for the list/detail split.

The top area holds two bordered panes side by side; the bottom row holds the
query input on the left and the status text on the right, split at the same
column as the panes.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LIST_PERCENT = 30.0


@dataclass(frozen=True)
class ScreenLayout:
    columns: int
    lines: int
    list_width: int
    detail_width: int
    pane_rows: int

    @property
    def list_inner_width(self) -> int:
        return max(1, self.list_width - 2)

    @property
    def detail_inner_width(self) -> int:
        return max(1, self.detail_width - 2)

    @property
    def inner_rows(self) -> int:
        return max(1, self.pane_rows - 2)


def compute_list_width(total_width: int, percent: float | None = None) -> int:
    """Choose list-pane width from total terminal width and an optional percentage."""
    if percent is None:
        percent = DEFAULT_LIST_PERCENT
    return clamp_list_width(total_width, round(total_width * percent / 100.0))


def clamp_list_width(total_width: int, desired: int) -> int:
    """Clamp list-pane width so both panes keep room for borders and text."""
    max_possible = max(1, total_width - 3)
    min_width = max(12, min(20, total_width - 12))
    max_width = max(min_width, total_width - 12)
    max_width = min(max_width, max_possible)
    min_width = min(min_width, max_width)
    return max(min_width, min(desired, max_width))


def compute_layout(columns: int, lines: int, list_percent: float | None = None) -> ScreenLayout:
    columns = max(4, columns)
    lines = max(4, lines)
    list_width = compute_list_width(columns, list_percent)
    return ScreenLayout(
        columns=columns,
        lines=lines,
        list_width=list_width,
        detail_width=max(1, columns - list_width),
        pane_rows=lines - 1,
    )
