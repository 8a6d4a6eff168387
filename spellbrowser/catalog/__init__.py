"""Spell catalog model, loading, and background production."""

from __future__ import annotations

from .loader import BUNDLED_CATALOG_PATH, load_catalog, spell_from_mapping
from .producer import CatalogProducer
from .types import Catalog, Spell

__all__ = [
    "BUNDLED_CATALOG_PATH",
    "Catalog",
    "CatalogProducer",
    "Spell",
    "load_catalog",
    "spell_from_mapping",
]
