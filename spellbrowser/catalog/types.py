"""Catalog data types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Spell:
    """One catalog entry. Never mutated after load."""

    name: str
    level: int
    ritual: bool = False
    concentration: bool = False
    school: str = ""
    casting_time: str = ""
    range: str = ""
    components: str = ""
    duration: str = ""
    classes: tuple[str, ...] = ()
    description: str = ""
    higher_levels: str = ""

    @property
    def level_label(self) -> str:
        """Human label for spell level, ``Cantrip`` for level 0."""
        if self.level == 0:
            return "Cantrip"
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(self.level, "th")
        return f"{self.level}{suffix}-level"


Catalog = tuple[Spell, ...]
