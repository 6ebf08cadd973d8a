"""
Catalog service helpers.
"""

from .branding import get_brand_color
from .gallery import ProductGallery, build_product_gallery
from .gallery_requests import GallerySnapshot, parse_index, resolve_gallery_request

__all__ = [
    "GallerySnapshot",
    "ProductGallery",
    "build_product_gallery",
    "get_brand_color",
    "parse_index",
    "resolve_gallery_request",
]
