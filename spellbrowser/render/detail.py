"""Spell detail formatting for the right-hand pane."""

from __future__ import annotations

from ..ansi import wrap_words
from ..catalog.types import Spell
from ..ui_theme import DEFAULT_THEME, UITheme

EMPTY_DETAIL_HINT = "Select a spell and press Enter to show it here."


def _meta_line(spell: Spell) -> str:
    school = spell.school.strip()
    if spell.level == 0:
        return f"{school.capitalize()} cantrip" if school else "Cantrip"
    if school:
        return f"{spell.level_label} {school.lower()}"
    return spell.level_label


def spell_detail_lines(spell: Spell | None, width: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Render ``spell`` as styled lines no wider than ``width`` columns."""
    if spell is None:
        return [f"{theme.placeholder}{line}{theme.reset}" for line in wrap_words(EMPTY_DETAIL_HINT, width)]

    lines: list[str] = []
    lines.extend(f"{theme.detail_heading}{line}{theme.reset}" for line in wrap_words(spell.name, width))
    lines.extend(f"{theme.detail_meta}{line}{theme.reset}" for line in wrap_words(_meta_line(spell), width))

    tags = [tag for tag, on in (("Concentration", spell.concentration), ("Ritual", spell.ritual)) if on]
    if tags:
        lines.extend(f"{theme.detail_tag}{line}{theme.reset}" for line in wrap_words(" · ".join(tags), width))
    lines.append("")

    properties = (
        ("Casting Time", spell.casting_time),
        ("Range", spell.range),
        ("Components", spell.components),
        ("Duration", spell.duration),
        ("Classes", ", ".join(spell.classes)),
    )
    for label, value in properties:
        if not value:
            continue
        wrapped = wrap_words(f"{label}: {value}", width)
        head = wrapped[0]
        if head.startswith(f"{label}:"):
            head = f"{theme.detail_label}{label}:{theme.reset}{head[len(label) + 1 :]}"
        lines.append(head)
        lines.extend(wrapped[1:])

    if spell.description:
        lines.append("")
        lines.extend(wrap_words(spell.description, width))
    if spell.higher_levels:
        lines.append("")
        lines.append(f"{theme.detail_label}At Higher Levels.{theme.reset}")
        lines.extend(wrap_words(spell.higher_levels, width))
    return lines
