"""
Resolve gallery/lightbox state from request query parameters.

The product page is server rendered, so each interaction is a link that
carries the state forward:

    image=<int>     position of the displayed image in the combined sequence
    nav=next|prev   step the inline gallery once
    lightbox=<int>  lightbox open at that position
    key=<key>       key press delivered to the open lightbox
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .gallery import Direction, KeyListenerRegistry, ProductGallery
from .gallery.paths import PlaceholderKind, classify_placeholder, is_real_image_path

logger = logging.getLogger(__name__)


def parse_index(raw: Any, length: int) -> Optional[int]:
    """Parse a query-string index; ``None`` for missing, malformed or out-of-range values."""
    if raw in (None, ""):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed gallery index %r", raw)
        return None
    if not 0 <= value < length:
        logger.debug("Ignoring out-of-range gallery index %d (length %d)", value, length)
        return None
    return value


@dataclass(frozen=True)
class GallerySnapshot:
    """
    Resolved state for one render.

    Attributes:
        gallery: The product gallery the state refers to.
        displayed: Ref in the main slot.
        current_index: Its position in the combined sequence (-1 if absent).
        lightbox_open: Whether the overlay is shown.
        lightbox_index: Overlay position, ``None`` while closed.
        key_handled: Whether a `key` parameter reached a listener.
    """

    gallery: ProductGallery
    displayed: str
    current_index: int
    lightbox_open: bool = False
    lightbox_index: Optional[int] = None
    key_handled: bool = False

    @property
    def lightbox_image(self) -> Optional[str]:
        if not self.lightbox_open or self.lightbox_index is None:
            return None
        return self.gallery.sequence.combined[self.lightbox_index]

    def placeholder_kinds(self):
        """Per combined slot: 'color'/'project' for placeholder tags, else ``None``."""
        kinds = []
        for ref in self.gallery.sequence.combined:
            kind: Optional[PlaceholderKind] = None
            if not is_real_image_path(ref):
                kind = classify_placeholder(ref)
            kinds.append(kind.kind if kind else None)
        return kinds


def resolve_gallery_request(gallery: ProductGallery, params: Mapping[str, Any]) -> GallerySnapshot:
    """
    Replay the query parameters against fresh gallery and lightbox state.

    The lightbox key listener only exists inside this call: it is registered
    when the lightbox opens and removed before returning, whatever happens.
    """
    length = len(gallery.sequence)
    state = gallery.new_state()

    image_index = parse_index(params.get("image"), length)
    if image_index is not None:
        state.select_index(image_index)

    nav = params.get("nav")
    if nav in (Direction.NEXT.value, Direction.PREV.value):
        state.navigate(nav)
    elif nav:
        logger.debug("Ignoring unknown gallery direction %r", nav)

    listeners = KeyListenerRegistry()
    lightbox = gallery.new_lightbox(listeners)
    key_handled = False
    try:
        lightbox_index = parse_index(params.get("lightbox"), length)
        if lightbox_index is not None:
            lightbox.open(lightbox_index)

        key = params.get("key")
        if key:
            key_handled = listeners.dispatch(key)

        return GallerySnapshot(
            gallery=gallery,
            displayed=state.displayed,
            current_index=state.current_index,
            lightbox_open=lightbox.is_open,
            lightbox_index=lightbox.index if lightbox.is_open else None,
            key_handled=key_handled,
        )
    finally:
        lightbox.close()
