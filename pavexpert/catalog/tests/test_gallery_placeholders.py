"""
Tests for slot padding (`catalog.services.gallery.placeholders`).
"""
from django.test import SimpleTestCase

from catalog.services.gallery import (
    SLOT_COUNT,
    PlaceholderKind,
    build_gallery_sequence,
    generate_placeholders,
    pad_to_ten,
)


def _images(count):
    return [f"/images/product/photo-{index}.jpg" for index in range(count)]


class PadToTenTests(SimpleTestCase):
    def test_length_is_always_ten(self):
        for kind in PlaceholderKind:
            for count in range(0, 16):
                with self.subTest(kind=kind, count=count):
                    self.assertEqual(len(pad_to_ten(_images(count), kind)), SLOT_COUNT)

    def test_real_images_keep_order(self):
        for count in range(0, SLOT_COUNT + 1):
            images = _images(count)
            with self.subTest(count=count):
                self.assertEqual(pad_to_ten(images, PlaceholderKind.COLOR)[:count], images)

    def test_truncates_without_placeholders(self):
        images = _images(14)
        self.assertEqual(pad_to_ten(images, PlaceholderKind.PROJECT), images[:10])

    def test_placeholder_ordinals_start_at_one(self):
        padded = pad_to_ten(["/images/a.png", "/images/b.png"], PlaceholderKind.COLOR)
        self.assertEqual(
            padded,
            ["/images/a.png", "/images/b.png"] + [f"PC-{n}" for n in range(1, 9)],
        )

    def test_deterministic(self):
        images = _images(3)
        self.assertEqual(pad_to_ten(images, "project"), pad_to_ten(images, "project"))

    def test_input_not_mutated(self):
        images = _images(2)
        pad_to_ten(images, PlaceholderKind.COLOR)
        self.assertEqual(len(images), 2)


class GeneratePlaceholdersTests(SimpleTestCase):
    def test_tags(self):
        self.assertEqual(generate_placeholders(3, PlaceholderKind.PROJECT), ["PI-1", "PI-2", "PI-3"])

    def test_zero_and_negative(self):
        self.assertEqual(generate_placeholders(0, "color"), [])
        self.assertEqual(generate_placeholders(-2, "color"), [])


class GallerySequenceTests(SimpleTestCase):
    def test_combined_is_colour_then_project(self):
        sequence = build_gallery_sequence(["/images/c.png"], ["/images/p.jpg"])
        self.assertEqual(len(sequence), 20)
        self.assertEqual(sequence.combined[0], "/images/c.png")
        self.assertEqual(sequence.combined[1], "PC-1")
        self.assertEqual(sequence.combined[10], "/images/p.jpg")
        self.assertEqual(sequence.combined[11], "PI-1")

    def test_index_of(self):
        sequence = build_gallery_sequence([], [])
        self.assertEqual(sequence.index_of("PI-10"), 19)
        self.assertEqual(sequence.index_of("/images/missing.png"), -1)
