"""
Fixed-size slot lists for the colour and project thumbnail rows.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from .paths import PlaceholderKind

SLOT_COUNT = 10


def generate_placeholders(count: int, kind: Union[PlaceholderKind, str]) -> List[str]:
    """
    Placeholder tags ``{prefix}-1 .. {prefix}-count``.

    Ordinals are positional only, so repeated calls give identical tags.
    """
    prefix = PlaceholderKind.coerce(kind).value
    return [f"{prefix}-{index + 1}" for index in range(max(count, 0))]


def pad_to_ten(images: Sequence[str], kind: Union[PlaceholderKind, str]) -> List[str]:
    """
    Return exactly ``SLOT_COUNT`` refs: the supplied images in order, then
    placeholders numbered from 1. Extra images are dropped silently.
    """
    if len(images) >= SLOT_COUNT:
        return list(images[:SLOT_COUNT])
    return list(images) + generate_placeholders(SLOT_COUNT - len(images), kind)


@dataclass(frozen=True)
class GallerySequence:
    """
    Padded colour and project rows plus the combined navigation order.

    `combined` is always colour slots followed by project slots.
    """

    color: tuple
    project: tuple

    @property
    def combined(self) -> tuple:
        return self.color + self.project

    def __len__(self) -> int:
        return len(self.color) + len(self.project)

    def index_of(self, ref: str) -> int:
        """First position of ``ref`` in the combined order, -1 when absent."""
        try:
            return self.combined.index(ref)
        except ValueError:
            return -1


def build_gallery_sequence(
    color_images: Sequence[str],
    project_images: Sequence[str],
) -> GallerySequence:
    return GallerySequence(
        color=tuple(pad_to_ten(color_images, PlaceholderKind.COLOR)),
        project=tuple(pad_to_ten(project_images, PlaceholderKind.PROJECT)),
    )
