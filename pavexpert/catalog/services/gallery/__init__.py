"""
Product image gallery: ref classification, slot padding, gallery/lightbox state.
"""

from .builder import ProductGallery, build_product_gallery
from .keyboard import ARROW_LEFT, ARROW_RIGHT, ESCAPE, KeyListenerRegistry
from .paths import (
    ImageRef,
    Placeholder,
    PlaceholderKind,
    RealImage,
    UnknownImage,
    classify_placeholder,
    is_real_image_path,
    normalize_path,
    parse_image_ref,
)
from .placeholders import (
    SLOT_COUNT,
    GallerySequence,
    build_gallery_sequence,
    generate_placeholders,
    pad_to_ten,
)
from .state import Direction, GalleryState, LightboxClosedError, LightboxState, step_index

__all__ = [
    "ARROW_LEFT",
    "ARROW_RIGHT",
    "ESCAPE",
    "SLOT_COUNT",
    "Direction",
    "GallerySequence",
    "GalleryState",
    "ImageRef",
    "KeyListenerRegistry",
    "LightboxClosedError",
    "LightboxState",
    "Placeholder",
    "PlaceholderKind",
    "ProductGallery",
    "RealImage",
    "UnknownImage",
    "build_gallery_sequence",
    "build_product_gallery",
    "classify_placeholder",
    "generate_placeholders",
    "is_real_image_path",
    "normalize_path",
    "pad_to_ten",
    "parse_image_ref",
    "step_index",
]
