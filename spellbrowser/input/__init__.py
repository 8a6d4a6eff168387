"""Input-layer public API: key decoding and global key dispatch."""

from .dispatcher import InputDispatcher
from .key_registry import KeyBinding, KeyRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "InputDispatcher",
    "KeyBinding",
    "KeyRegistry",
    "read_key",
]
