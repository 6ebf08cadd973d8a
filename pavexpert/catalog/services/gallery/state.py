"""
Inline gallery and lightbox state.

`GalleryState` is the image shown in the main slot; `LightboxState` is the
overlay's own position in the same combined sequence. The two never write to
each other: opening the lightbox copies the gallery position once, and after
that each side moves on its own.
"""
from __future__ import annotations

import enum
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from .keyboard import ARROW_LEFT, ARROW_RIGHT, ESCAPE, KeyListenerRegistry
from .placeholders import GallerySequence

logger = logging.getLogger(__name__)


class Direction(str, enum.Enum):
    NEXT = "next"
    PREV = "prev"


class LightboxClosedError(RuntimeError):
    """Raised when a lightbox operation needs the overlay to be open."""


def step_index(index: int, direction: Union[Direction, str], length: int) -> int:
    """Circular step: past the last slot comes the first, before the first the last."""
    if Direction(direction) is Direction.NEXT:
        return (index + 1) % length
    return (index - 1 + length) % length


class GalleryState:
    """
    The image currently displayed in the inline gallery.

    Attributes:
        sequence: Padded colour/project slots the gallery navigates over.
        displayed: Ref shown in the main slot.
    """

    def __init__(self, sequence: GallerySequence, displayed: str) -> None:
        self.sequence = sequence
        self.displayed = displayed

    def __repr__(self) -> str:
        return f"<GalleryState displayed={self.displayed!r} index={self.current_index}>"

    @property
    def current_index(self) -> int:
        """Position of `displayed` in the combined sequence, -1 when absent."""
        return self.sequence.index_of(self.displayed)

    def select_image(self, ref: str) -> str:
        """Show ``ref``. No membership check is made."""
        self.displayed = ref
        return self.displayed

    def select_index(self, index: int) -> str:
        self.displayed = self.sequence.combined[index]
        return self.displayed

    def navigate(self, direction: Union[Direction, str]) -> str:
        """
        Move one slot in ``direction`` with wraparound.

        When `displayed` is not part of the sequence the gallery restarts at
        the first slot, whichever direction was asked for.
        """
        index = self.current_index
        if index == -1:
            logger.debug("Displayed image %r not in gallery sequence; resetting to first slot", self.displayed)
            new_index = 0
        else:
            new_index = step_index(index, direction, len(self.sequence))
        return self.select_index(new_index)


class LightboxState:
    """
    Full-screen overlay over the combined sequence.

    While open, `handle_key` is registered with ``listeners`` (when given);
    every path out of the open state removes it again.
    """

    def __init__(
        self,
        sequence: GallerySequence,
        listeners: Optional[KeyListenerRegistry] = None,
    ) -> None:
        self.sequence = sequence
        self.listeners = listeners
        self.is_open = False
        self.index = 0

    def __repr__(self) -> str:
        state = f"open index={self.index}" if self.is_open else "closed"
        return f"<LightboxState {state}>"

    @property
    def image(self) -> Optional[str]:
        if not self.is_open:
            return None
        return self.sequence.combined[self.index]

    def open(self, index: int) -> None:
        """Show the overlay at ``index``, normally the gallery's current position."""
        self.index = index
        self.is_open = True
        if self.listeners is not None:
            self.listeners.add(self.handle_key)

    def open_from(self, gallery: GalleryState) -> None:
        """Open at the gallery's position (first slot when the gallery is off-sequence)."""
        self.open(max(gallery.current_index, 0))

    def close(self) -> None:
        self.is_open = False
        if self.listeners is not None:
            self.listeners.remove(self.handle_key)

    def _require_open(self) -> None:
        if not self.is_open:
            raise LightboxClosedError("Lightbox is closed")

    def navigate(self, direction: Union[Direction, str]) -> int:
        self._require_open()
        self.index = step_index(self.index, direction, len(self.sequence))
        return self.index

    def jump_to(self, index: int) -> int:
        """Thumbnail click inside the overlay. The index is taken as given."""
        self._require_open()
        self.index = index
        return self.index

    def handle_key(self, key: str) -> bool:
        if not self.is_open:
            return False
        if key == ESCAPE:
            self.close()
        elif key == ARROW_RIGHT:
            self.navigate(Direction.NEXT)
        elif key == ARROW_LEFT:
            self.navigate(Direction.PREV)
        else:
            return False
        return True

    @contextmanager
    def session(self, index: int) -> Iterator["LightboxState"]:
        """Open at ``index`` for the duration of the block; always closes on exit."""
        self.open(index)
        try:
            yield self
        finally:
            self.close()
