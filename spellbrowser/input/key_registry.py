"""Key-token to action dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """One or more key tokens bound to a single action."""

    keys: tuple[str, ...]
    action: Callable[[], None]


class KeyRegistry:
    """Exact-match key dispatch; the first registration of a token wins."""

    def __init__(self) -> None:
        self._actions: dict[str, Callable[[], None]] = {}

    def register(self, *bindings: KeyBinding) -> KeyRegistry:
        for binding in bindings:
            for key in binding.keys:
                self._actions.setdefault(key, binding.action)
        return self

    def bound_keys(self) -> frozenset[str]:
        return frozenset(self._actions)

    def dispatch(self, key: str) -> bool:
        """Run the action bound to ``key``; return whether one existed."""
        action = self._actions.get(key)
        if action is None:
            return False
        action()
        return True
