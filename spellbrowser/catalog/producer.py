"""Background catalog producer.

Loads the catalog on a daemon thread and hands the result to the UI through
two channels: one catalog payload per load attempt, and any number of status
strings. Load failures are reported as status text only.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from ..errors import CatalogLoadError
from ..runtime.channel import Channel
from .loader import load_catalog
from .types import Catalog

logger = logging.getLogger(__name__)


class CatalogProducer:
    """Run one-shot catalog loads off the UI thread."""

    def __init__(
        self,
        source: Path,
        catalog_channel: Channel[Catalog],
        status_channel: Channel[str],
        load: Callable[[Path], Catalog] = load_catalog,
    ) -> None:
        self.source = source
        self._catalog_channel = catalog_channel
        self._status_channel = status_channel
        self._load = load
        self._worker: threading.Thread | None = None

    def run(self) -> bool:
        """Load synchronously, returning whether a catalog was delivered."""
        self._status_channel.send(f"Loading spells from {self.source.name}...")
        try:
            catalog = self._load(self.source)
        except CatalogLoadError as exc:
            logger.exception("catalog load from %s failed", self.source)
            self._status_channel.send(f"Failed to load spells: {exc}")
            return False
        self._catalog_channel.send(catalog)
        logger.info("delivered %d spells from %s", len(catalog), self.source)
        self._status_channel.send(f"Loaded {len(catalog)} spells")
        return True

    def start(self) -> threading.Thread:
        """Start the load on a daemon thread; later calls return the same worker."""
        if self._worker is not None:
            return self._worker
        worker = threading.Thread(
            target=self.run,
            name="spellbrowser-catalog-load",
            daemon=True,
        )
        self._worker = worker
        worker.start()
        return worker
