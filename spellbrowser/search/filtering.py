"""Incremental name filter for the spell list.

``recompute`` turns the catalog and the current query into the rows shown in
the list pane. Rows keep the catalog order and carry the catalog index of the
spell they display.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..catalog.types import Spell
from .highlight import MATCH_END, MATCH_START, highlight

logger = logging.getLogger(__name__)

MIN_FLAG_ROOM = 3


@dataclass(frozen=True)
class VisibleRow:
    """One rendered list row and the catalog index it refers to."""

    label: str
    source_index: int


def matches(name: str, query: str) -> bool:
    """Return whether ``query`` occurs in ``name``, ignoring case."""
    return query.lower() in name.lower()


def spell_flags(spell: Spell) -> str:
    """Compact flag suffix: ``C`` for concentration, then ``R`` for ritual."""
    flags = ""
    if spell.concentration:
        flags += "C"
    if spell.ritual:
        flags += "R"
    return flags


def format_label(
    spell: Spell,
    query: str,
    available_width: int,
    *,
    match_start: str = MATCH_START,
    match_end: str = MATCH_END,
) -> str:
    """Render ``"<level> <name>"`` with query emphasis and right-aligned flags.

    Flags are appended only when at least ``MIN_FLAG_ROOM`` columns remain
    after the base label; otherwise they are dropped.
    """
    base = f"{spell.level} {spell.name}"
    label = highlight(base, query, start=match_start, end=match_end)
    flags = spell_flags(spell)
    if not flags:
        return label
    pad_len = available_width - len(base)
    if pad_len < MIN_FLAG_ROOM:
        return label
    return label + " " * (pad_len - len(flags)) + flags


def recompute(
    catalog: Sequence[Spell],
    query: str,
    available_width: int,
    *,
    match_start: str = MATCH_START,
    match_end: str = MATCH_END,
) -> list[VisibleRow]:
    """Filter ``catalog`` by ``query`` and build the visible rows in catalog order."""
    rows: list[VisibleRow] = []
    for index, spell in enumerate(catalog):
        if not matches(spell.name, query):
            continue
        label = format_label(
            spell,
            query,
            available_width,
            match_start=match_start,
            match_end=match_end,
        )
        rows.append(VisibleRow(label=label, source_index=index))
    logger.debug("query %r matched %d of %d spells", query, len(rows), len(catalog))
    return rows
