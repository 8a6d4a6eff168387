"""Immutable messages posted from worker threads to the UI loop."""

from __future__ import annotations

from dataclasses import dataclass

from ..catalog.types import Catalog


@dataclass(frozen=True)
class CatalogLoaded:
    """A complete catalog payload replacing the current one."""

    catalog: Catalog


@dataclass(frozen=True)
class StatusPosted:
    """Status text to show until the next key press."""

    text: str


SessionEvent = CatalogLoaded | StatusPosted
