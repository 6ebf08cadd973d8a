"""
Tests for inline gallery state, lightbox state and key listeners.
"""
from django.test import SimpleTestCase

from catalog.services.gallery import (
    ARROW_LEFT,
    ARROW_RIGHT,
    ESCAPE,
    Direction,
    GalleryState,
    KeyListenerRegistry,
    LightboxClosedError,
    LightboxState,
    build_gallery_sequence,
)


class GalleryFixtureMixin:
    def setUp(self):
        super().setUp()
        self.sequence = build_gallery_sequence(["/images/c1.png", "/images/c2.png"], [])
        self.gallery = GalleryState(self.sequence, self.sequence.combined[0])


class GalleryStateTests(GalleryFixtureMixin, SimpleTestCase):
    def test_next_wraps_from_last_to_first(self):
        self.gallery.select_index(19)
        self.gallery.navigate("next")
        self.assertEqual(self.gallery.current_index, 0)
        self.assertEqual(self.gallery.displayed, "/images/c1.png")

    def test_prev_wraps_from_first_to_last(self):
        self.gallery.select_index(0)
        self.gallery.navigate(Direction.PREV)
        self.assertEqual(self.gallery.current_index, 19)
        self.assertEqual(self.gallery.displayed, "PI-10")

    def test_steps_through_colour_into_project_row(self):
        self.gallery.select_index(9)
        self.assertEqual(self.gallery.navigate("next"), "PI-1")

    def test_select_image_is_unconditional(self):
        self.gallery.select_image("/images/elsewhere.png")
        self.assertEqual(self.gallery.displayed, "/images/elsewhere.png")
        self.assertEqual(self.gallery.current_index, -1)

    def test_off_sequence_navigation_restarts_at_first_slot(self):
        for direction in ("next", "prev"):
            with self.subTest(direction=direction):
                self.gallery.select_image("/images/elsewhere.png")
                self.gallery.navigate(direction)
                self.assertEqual(self.gallery.current_index, 0)

    def test_unknown_direction(self):
        with self.assertRaises(ValueError):
            self.gallery.navigate("sideways")


class LightboxStateTests(GalleryFixtureMixin, SimpleTestCase):
    def setUp(self):
        super().setUp()
        self.lightbox = LightboxState(self.sequence)

    def test_starts_closed(self):
        self.assertFalse(self.lightbox.is_open)
        self.assertIsNone(self.lightbox.image)

    def test_open_from_gallery_position(self):
        self.gallery.select_index(4)
        self.lightbox.open_from(self.gallery)
        self.assertTrue(self.lightbox.is_open)
        self.assertEqual(self.lightbox.index, 4)
        self.assertEqual(self.lightbox.image, "PC-3")

    def test_navigation_does_not_touch_gallery(self):
        self.gallery.select_index(5)
        displayed = self.gallery.displayed
        self.lightbox.open(5)
        for _ in range(3):
            self.lightbox.navigate("next")
        self.assertEqual(self.lightbox.index, 8)
        self.assertEqual(self.gallery.displayed, displayed)

    def test_gallery_navigation_does_not_touch_lightbox(self):
        self.lightbox.open(2)
        self.gallery.navigate("next")
        self.assertEqual(self.lightbox.index, 2)

    def test_wraparound(self):
        self.lightbox.open(19)
        self.assertEqual(self.lightbox.navigate("next"), 0)
        self.assertEqual(self.lightbox.navigate("prev"), 19)

    def test_jump_to(self):
        self.lightbox.open(0)
        self.lightbox.jump_to(12)
        self.assertEqual(self.lightbox.image, "PI-3")

    def test_operations_need_open_lightbox(self):
        with self.assertRaises(LightboxClosedError):
            self.lightbox.navigate("next")
        with self.assertRaises(LightboxClosedError):
            self.lightbox.jump_to(3)

    def test_keys(self):
        self.lightbox.open(1)
        self.assertTrue(self.lightbox.handle_key(ARROW_RIGHT))
        self.assertEqual(self.lightbox.index, 2)
        self.assertTrue(self.lightbox.handle_key(ARROW_LEFT))
        self.assertEqual(self.lightbox.index, 1)
        self.assertFalse(self.lightbox.handle_key("Enter"))
        self.assertTrue(self.lightbox.handle_key(ESCAPE))
        self.assertFalse(self.lightbox.is_open)
        self.assertFalse(self.lightbox.handle_key(ARROW_RIGHT))

    def test_close_is_idempotent(self):
        self.lightbox.close()
        self.lightbox.open(3)
        self.lightbox.close()
        self.lightbox.close()
        self.assertFalse(self.lightbox.is_open)


class LightboxListenerTests(GalleryFixtureMixin, SimpleTestCase):
    def setUp(self):
        super().setUp()
        self.listeners = KeyListenerRegistry()
        self.lightbox = LightboxState(self.sequence, self.listeners)

    def test_listener_only_while_open(self):
        self.assertEqual(len(self.listeners), 0)
        self.lightbox.open(0)
        self.assertIn(self.lightbox.handle_key, self.listeners)
        self.lightbox.close()
        self.assertEqual(len(self.listeners), 0)

    def test_repeated_cycles_do_not_accumulate(self):
        for index in range(5):
            self.lightbox.open(index)
            self.lightbox.open(index)
            self.assertEqual(len(self.listeners), 1)
            self.lightbox.close()
        self.assertEqual(len(self.listeners), 0)

    def test_dispatch_reaches_open_lightbox(self):
        self.lightbox.open(3)
        self.assertTrue(self.listeners.dispatch(ARROW_RIGHT))
        self.assertEqual(self.lightbox.index, 4)

    def test_escape_unregisters(self):
        self.lightbox.open(3)
        self.listeners.dispatch(ESCAPE)
        self.assertFalse(self.lightbox.is_open)
        self.assertEqual(len(self.listeners), 0)
        self.assertFalse(self.listeners.dispatch(ARROW_RIGHT))

    def test_session_closes_on_error(self):
        with self.assertRaises(RuntimeError):
            with self.lightbox.session(6) as lightbox:
                self.assertEqual(len(self.listeners), 1)
                lightbox.navigate("prev")
                raise RuntimeError("render failed")
        self.assertFalse(self.lightbox.is_open)
        self.assertEqual(len(self.listeners), 0)


class KeyListenerRegistryTests(SimpleTestCase):
    def test_listening_scope(self):
        registry = KeyListenerRegistry()
        seen = []

        def listener(key):
            seen.append(key)
            return True

        with registry.listening(listener):
            self.assertTrue(registry.dispatch("a"))
        self.assertFalse(registry.dispatch("b"))
        self.assertEqual(seen, ["a"])

    def test_remove_unknown_listener(self):
        registry = KeyListenerRegistry()
        registry.remove(lambda key: True)
        self.assertEqual(len(registry), 0)
