"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, list rows, match emphasis, and the
detail view.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    border_focused: str
    title: str
    title_focused: str
    match_start: str
    match_end: str
    query_label: str
    query_text: str
    status: str
    detail_heading: str
    detail_meta: str
    detail_label: str
    detail_tag: str
    placeholder: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[2m",
    border_focused="\033[1m",
    title="\033[2m",
    title_focused="\033[1;38;5;81m",
    match_start="\033[1;31m",
    match_end="\033[22;39m",
    query_label="\033[1;38;5;81m",
    query_text="\033[38;5;252m",
    status="\033[38;5;229m",
    detail_heading="\033[1;38;5;45m",
    detail_meta="\033[3;38;5;250m",
    detail_label="\033[1;38;5;252m",
    detail_tag="\033[38;5;214m",
    placeholder="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    border_focused="\033[1;38;5;45m",
    title="\033[2;38;5;110m",
    title_focused="\033[1;38;5;45m",
    match_start="\033[1;38;5;203m",
    match_end="\033[22;39m",
    query_label="\033[1;38;5;45m",
    query_text="\033[38;5;153m",
    status="\033[38;5;153m",
    detail_heading="\033[1;38;5;45m",
    detail_meta="\033[3;38;5;110m",
    detail_label="\033[1;38;5;117m",
    detail_tag="\033[38;5;73m",
    placeholder="\033[2;38;5;110m",
)

MONO_THEME = UITheme(
    name="mono",
    reset="\033[0m",
    border="",
    border_focused="\033[1m",
    title="",
    title_focused="\033[1m",
    match_start="\033[4m",
    match_end="\033[24m",
    query_label="\033[1m",
    query_text="",
    status="",
    detail_heading="\033[1m",
    detail_meta="",
    detail_label="\033[1m",
    detail_tag="",
    placeholder="\033[2m",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME, MONO_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return theme by name; unknown names fall back to the default palette."""
    if no_color:
        return MONO_THEME
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
