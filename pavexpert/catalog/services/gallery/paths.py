"""
Image reference classification: stored image paths vs. placeholder tags.

Every function here is total: any string gets *some* answer, and nothing is
logged. Classification is substring based, so a stored file whose name
contains ``PC-``/``PI-`` reads as a placeholder and an extension-less CDN URL
reads as "not a real image". `parse_image_ref` turns a raw string into a
tagged value once, so renderers branch on a type instead of re-sniffing.
"""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional, Union

IMAGES_DIR_MARKER = "/images/"
RASTER_EXTENSIONS = (".jpg", ".jpeg", ".png")
PATH_SEPARATOR = "/"

_ORDINAL_RE = re.compile(r"-(\d+)$")


class PlaceholderKind(str, enum.Enum):
    """
    Placeholder slot kinds. The value is the tag prefix used in generated
    identifiers (``PC-3``, ``PI-7``).
    """

    COLOR = "PC"
    PROJECT = "PI"

    @property
    def kind(self) -> str:
        return "color" if self is PlaceholderKind.COLOR else "project"

    @property
    def marker(self) -> str:
        return f"{self.value}-"

    @classmethod
    def coerce(cls, value: Union["PlaceholderKind", str]) -> "PlaceholderKind":
        """Accept an enum member, its tag prefix ("PC") or its kind name ("color")."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.kind):
                return member
        raise ValueError(f"Unknown placeholder kind: {value!r}")


def classify_placeholder(ref: str) -> Optional[PlaceholderKind]:
    """
    Return the placeholder kind of ``ref`` or ``None`` for anything else.

    Project markers are checked first, so a string containing both reads as
    a project placeholder.
    """
    if not isinstance(ref, str):
        return None
    if PlaceholderKind.PROJECT.marker in ref:
        return PlaceholderKind.PROJECT
    if PlaceholderKind.COLOR.marker in ref:
        return PlaceholderKind.COLOR
    return None


def is_real_image_path(ref: str) -> bool:
    """True when ``ref`` mentions the stored-images directory or a raster extension."""
    if not isinstance(ref, str):
        return False
    return IMAGES_DIR_MARKER in ref or any(ext in ref for ext in RASTER_EXTENSIONS)


def normalize_path(ref: str) -> str:
    """Prefix a single leading separator unless one is already there."""
    if ref.startswith(PATH_SEPARATOR):
        return ref
    return f"{PATH_SEPARATOR}{ref}"


@dataclass(frozen=True)
class RealImage:
    raw: str

    @property
    def path(self) -> str:
        return normalize_path(self.raw)


@dataclass(frozen=True)
class Placeholder:
    raw: str
    kind: PlaceholderKind
    ordinal: Optional[int] = None


@dataclass(frozen=True)
class UnknownImage:
    """Neither a stored image nor a recognised placeholder (empty, bare URL, ...)."""

    raw: str

    @property
    def label(self) -> str:
        """Last path segment without the query string, for the generic placeholder box."""
        tail = self.raw.split("/")[-1].split("?")[0]
        return tail or "Product Image"


ImageRef = Union[RealImage, Placeholder, UnknownImage]


def parse_image_ref(raw) -> ImageRef:
    """
    Classify ``raw`` once into a tagged value.

    Real paths win over placeholder markers, matching the order the
    renderers check them in.
    """
    if isinstance(raw, (RealImage, Placeholder, UnknownImage)):
        return raw
    text = raw if isinstance(raw, str) else ""
    if is_real_image_path(text):
        return RealImage(text)
    kind = classify_placeholder(text)
    if kind is not None:
        match = _ORDINAL_RE.search(text)
        return Placeholder(text, kind, int(match.group(1)) if match else None)
    return UnknownImage(text)
