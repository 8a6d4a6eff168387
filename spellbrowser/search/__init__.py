"""Query matching, label formatting, and match emphasis."""

from __future__ import annotations

from .filtering import VisibleRow, format_label, matches, recompute, spell_flags
from .highlight import MATCH_END, MATCH_START, highlight, match_spans

__all__ = [
    "MATCH_END",
    "MATCH_START",
    "VisibleRow",
    "format_label",
    "highlight",
    "match_spans",
    "matches",
    "recompute",
    "spell_flags",
]
