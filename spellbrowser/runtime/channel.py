"""One-directional closable channels between worker threads.

A channel is a FIFO with a close marker. Consumers iterate it and the
iteration ends once the producer closes it and every earlier value has been
delivered.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from queue import Queue
from typing import Generic, TypeVar

T = TypeVar("T")

_CLOSED = object()


class ChannelClosed(RuntimeError):
    """Raised on send after close, or on receive once a closed channel is drained."""


class Channel(Generic[T]):
    """Thread-safe FIFO that can be closed by its producer."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._queue: Queue[object] = Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def send(self, value: T) -> None:
        with self._lock:
            if self._closed:
                raise ChannelClosed(f"channel {self.name!r} is closed")
            self._queue.put(value)

    def close(self) -> None:
        """Close the channel; idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)

    def receive(self, timeout: float | None = None) -> T:
        """Block for the next value.

        Raises ``ChannelClosed`` once the channel is closed and drained, and
        ``queue.Empty`` when ``timeout`` expires first.
        """
        value = self._queue.get(timeout=timeout)
        if value is _CLOSED:
            # Leave the marker in place for any other consumer.
            self._queue.put(_CLOSED)
            raise ChannelClosed(f"channel {self.name!r} is closed")
        return value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return
