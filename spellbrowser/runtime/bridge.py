"""Listener threads that bridge producer channels into the session queue.

Each loop blocks on its channel and forwards every value, in order, as an
immutable event. Neither loop touches session state directly.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..catalog.types import Catalog
from .channel import Channel
from .events import CatalogLoaded, SessionEvent, StatusPosted

logger = logging.getLogger(__name__)


class AsyncBridge:
    """Run the catalog and status listener loops on daemon threads."""

    def __init__(
        self,
        catalog_channel: Channel[Catalog],
        status_channel: Channel[str],
        post: Callable[[SessionEvent], None],
    ) -> None:
        self._catalog_channel = catalog_channel
        self._status_channel = status_channel
        self._post = post
        self.threads: list[threading.Thread] = []

    def wait_for_catalogs(self) -> None:
        for catalog in self._catalog_channel:
            self._post(CatalogLoaded(catalog=tuple(catalog)))
        logger.debug("catalog channel closed")

    def wait_for_statuses(self) -> None:
        for text in self._status_channel:
            self._post(StatusPosted(text=str(text)))
        logger.debug("status channel closed")

    def start(self) -> list[threading.Thread]:
        """Start both listener loops once; later calls return the running threads."""
        if self.threads:
            return self.threads
        for name, target in (
            ("spellbrowser-catalog-listener", self.wait_for_catalogs),
            ("spellbrowser-status-listener", self.wait_for_statuses),
        ):
            worker = threading.Thread(target=target, name=name, daemon=True)
            worker.start()
            self.threads.append(worker)
        return self.threads
