"""
Turn a product record into gallery sequences and fresh state objects.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from .keyboard import KeyListenerRegistry
from .paths import ImageRef, parse_image_ref
from .placeholders import SLOT_COUNT, GallerySequence, build_gallery_sequence
from .state import GalleryState, LightboxState

logger = logging.getLogger(__name__)


def _clean_image_list(values: Any, field: str, label: str) -> List[str]:
    """
    Keep non-empty strings in their original order.
    """
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    cleaned = [value for value in values if isinstance(value, str) and value.strip()]
    dropped = len(values) - len(cleaned)
    if dropped:
        logger.debug("Dropped %d empty/non-string entries from %s of %s", dropped, field, label)
    if len(cleaned) > SLOT_COUNT:
        logger.info(
            "%s supplies %d %s; only the first %d are shown",
            label,
            len(cleaned),
            field,
            SLOT_COUNT,
        )
    return cleaned


def _record_fields(source: Any) -> Tuple[str, Any, Any, str]:
    """
    Extract (mainImage, colorImages, projectImages, label) from a mapping or
    an object exposing `gallery_record()`.
    """
    if hasattr(source, "gallery_record"):
        record = source.gallery_record()
        label = str(source)
    elif isinstance(source, Mapping):
        record = source
        label = "product record"
    else:
        raise TypeError(f"Cannot build a gallery from {type(source).__name__}")
    main_image = record.get("mainImage") or ""
    return (
        main_image if isinstance(main_image, str) else "",
        record.get("colorImages"),
        record.get("projectImages"),
        label,
    )


@dataclass(frozen=True)
class ProductGallery:
    """
    Everything the product page needs to draw the gallery.

    Attributes:
        sequence: Padded colour/project rows.
        main_image: The product's fallback/thumbnail image.
    """

    sequence: GallerySequence
    main_image: str = ""

    @property
    def initial_image(self) -> str:
        if self.sequence.color:
            return self.sequence.color[0]
        return self.main_image

    @property
    def refs(self) -> Tuple[ImageRef, ...]:
        return tuple(parse_image_ref(ref) for ref in self.sequence.combined)

    def new_state(self) -> GalleryState:
        return GalleryState(self.sequence, self.initial_image)

    def new_lightbox(self, listeners: Optional[KeyListenerRegistry] = None) -> LightboxState:
        return LightboxState(self.sequence, listeners)


def build_product_gallery(source: Any) -> ProductGallery:
    """
    Build a `ProductGallery` from a `Product` or a ``{"mainImage",
    "colorImages", "projectImages"}`` mapping.
    """
    main_image, color_images, project_images, label = _record_fields(source)
    sequence = build_gallery_sequence(
        _clean_image_list(color_images, "colour images", label),
        _clean_image_list(project_images, "project images", label),
    )
    return ProductGallery(sequence=sequence, main_image=main_image)
