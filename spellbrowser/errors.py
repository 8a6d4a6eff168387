"""Exception hierarchy for spellbrowser.

Catalog load failures are recoverable and reported through the status line.
Selection reference failures are fatal internal invariant violations.
"""

from __future__ import annotations


class SpellBrowserError(Exception):
    """Base class for all spellbrowser errors."""


class CatalogLoadError(SpellBrowserError):
    """Raised when a catalog source cannot be read or decoded."""


class SelectionReferenceError(SpellBrowserError):
    """Raised when a visible row no longer points into the loaded catalog."""

    def __init__(self, source_index: int, catalog_size: int) -> None:
        super().__init__(
            f"row references spell #{source_index} but catalog holds {catalog_size} spells"
        )
        self.source_index = source_index
        self.catalog_size = catalog_size
