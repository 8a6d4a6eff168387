"""Shared fixtures for spellbrowser tests."""

from __future__ import annotations

from spellbrowser.catalog.types import Spell


def sample_catalog() -> tuple[Spell, ...]:
    return (
        Spell(name="Fireball", level=3, school="Evocation", range="150 feet"),
        Spell(name="Fire Bolt", level=0, school="Evocation", range="120 feet"),
        Spell(name="Ice Storm", level=4, school="Evocation", range="300 feet"),
    )


def bestow_curse() -> Spell:
    return Spell(name="Bestow Curse", level=3, ritual=True, concentration=True)
