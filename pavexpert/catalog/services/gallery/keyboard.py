"""
Page-wide key listener registry.

The registry stands in for the window's keydown listeners: whatever is
registered receives every key press. Listeners must only be present while
their owner is visible, so registration is paired with removal through
`listening()`.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, List

KeyListener = Callable[[str], bool]

ESCAPE = "Escape"
ARROW_RIGHT = "ArrowRight"
ARROW_LEFT = "ArrowLeft"


class KeyListenerRegistry:
    def __init__(self) -> None:
        self._listeners: List[KeyListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: KeyListener) -> bool:
        return listener in self._listeners

    def add(self, listener: KeyListener) -> None:
        """Register ``listener``; registering the same listener twice is a no-op."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove(self, listener: KeyListener) -> None:
        """Unregister ``listener`` if present."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, key: str) -> bool:
        """
        Deliver ``key`` to every registered listener.

        Listeners may unregister themselves while handling the key.
        Returns True when at least one listener handled it.
        """
        handled = False
        for listener in list(self._listeners):
            if listener(key):
                handled = True
        return handled

    @contextmanager
    def listening(self, listener: KeyListener) -> Iterator[KeyListener]:
        self.add(listener)
        try:
            yield listener
        finally:
            self.remove(listener)
