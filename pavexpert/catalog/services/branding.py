"""
Brand accent colours used for the brand line on product pages.
"""
from __future__ import annotations

from typing import Optional

BRAND_COLORS = {
    "belgard": "#1A3057",
    "keystone": "#005596",
    "las vegas paver": "#842B38",
    "lvp": "#842B38",
    "default": "#000000",
}


def get_brand_color(brand: Optional[str]) -> str:
    """
    Map a free-form brand name to its accent colour.

    Matching is a case-insensitive substring test, so "Belgard Pavers" and
    "LVP" both resolve.
    """
    normalized = (brand or "").lower()
    if "belgard" in normalized:
        return BRAND_COLORS["belgard"]
    if "keystone" in normalized:
        return BRAND_COLORS["keystone"]
    if "las vegas" in normalized or "lvp" in normalized:
        return BRAND_COLORS["las vegas paver"]
    return BRAND_COLORS["default"]
