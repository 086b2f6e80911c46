"""Unit tests for the article write policy helpers."""

from __future__ import annotations

from unittest import mock

from django.test import SimpleTestCase
from rest_framework.exceptions import PermissionDenied, ValidationError

from articles.policy import (
    BASE_SLUG_MAX_LENGTH,
    derive_slug,
    gate_create_status,
    gate_publish_status,
    gate_update_status,
    normalize_slug,
    parse_tags,
)


class SlugDeriverTests(SimpleTestCase):

    def test_normalizes_punctuation_and_case(self):
        self.assertEqual(normalize_slug("  Hello,   World!  "), "hello-world")

    def test_keeps_unicode_letters(self):
        self.assertEqual(normalize_slug("Café Déjà Vu"), "café-déjà-vu")

    def test_empty_title_falls_back(self):
        self.assertEqual(normalize_slug(""), "article")
        self.assertEqual(normalize_slug("---"), "article")

    def test_long_slug_leaves_room_for_suffix(self):
        slug = normalize_slug("ﬃ" * 200)

        self.assertEqual(len(slug), BASE_SLUG_MAX_LENGTH)
        self.assertTrue(set(slug) <= set("fi"))

    def test_cut_does_not_leave_trailing_hyphen(self):
        title = "a" * (BASE_SLUG_MAX_LENGTH - 1) + " bcd"

        self.assertEqual(normalize_slug(title), "a" * (BASE_SLUG_MAX_LENGTH - 1))

    def test_free_slug_used_as_is(self):
        self.assertEqual(derive_slug("Hello World", lambda candidate: False), "hello-world")

    def test_conflict_appends_timestamp(self):
        taken = {"hello-world"}
        with mock.patch("articles.policy._timestamp_ms", return_value=1700000000000):
            slug = derive_slug("Hello World", taken.__contains__)

        self.assertEqual(slug, "hello-world-1700000000000")

    def test_suffix_bumped_while_taken(self):
        taken = {"hello-world", "hello-world-1000", "hello-world-1001"}
        with mock.patch("articles.policy._timestamp_ms", return_value=1000):
            slug = derive_slug("Hello World", taken.__contains__)

        self.assertEqual(slug, "hello-world-1002")

    def test_probe_sees_normalized_candidate(self):
        probe = mock.Mock(return_value=False)

        derive_slug("Some Title", probe)

        probe.assert_called_once_with("some-title")


class StatusGateTests(SimpleTestCase):

    def test_create_admin_published(self):
        self.assertEqual(gate_create_status("published", "admin"), "published")

    def test_create_editor_published_is_draft(self):
        self.assertEqual(gate_create_status("published", "editor"), "draft")

    def test_create_defaults_to_draft(self):
        self.assertEqual(gate_create_status(None, "admin"), "draft")
        self.assertEqual(gate_create_status("bogus", "admin"), "draft")

    def test_update_non_admin_leaves_status(self):
        self.assertIsNone(gate_update_status("published", "editor"))

    def test_update_not_requested_leaves_status(self):
        self.assertIsNone(gate_update_status(None, "admin"))
        self.assertIsNone(gate_update_status("", "admin"))

    def test_update_admin_sets_status(self):
        self.assertEqual(gate_update_status("published", "admin"), "published")
        self.assertEqual(gate_update_status("draft", "admin"), "draft")

    def test_update_admin_invalid_status(self):
        with self.assertRaises(ValidationError):
            gate_update_status("archived", "admin")

    def test_publish_requires_admin(self):
        with self.assertRaises(PermissionDenied):
            gate_publish_status("published", "editor")

    def test_publish_role_checked_before_value(self):
        with self.assertRaises(PermissionDenied):
            gate_publish_status("archived", "editor")

    def test_publish_rejects_unknown_value(self):
        with self.assertRaises(ValidationError):
            gate_publish_status("archived", "admin")
        with self.assertRaises(ValidationError):
            gate_publish_status(None, "admin")

    def test_publish_accepts_both_states(self):
        self.assertEqual(gate_publish_status("published", "admin"), "published")
        self.assertEqual(gate_publish_status("draft", "admin"), "draft")


class ParseTagsTests(SimpleTestCase):

    def test_splits_and_trims_in_order(self):
        self.assertEqual(parse_tags(" b, a ,c "), ["b", "a", "c"])

    def test_empty_inputs(self):
        self.assertEqual(parse_tags(None), [])
        self.assertEqual(parse_tags(""), [])

    def test_drops_empty_pieces(self):
        self.assertEqual(parse_tags("a,, ,b,"), ["a", "b"])
