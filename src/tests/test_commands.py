"""Tests for the seed_cms and set_role management commands."""

from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from articles.models import Article
from authentication.models import User
from tests.utils import create_user


class SeedCmsCommandTests(TestCase):

    def test_seed_creates_users_and_articles(self):
        out = StringIO()
        call_command("seed_cms", stdout=out)

        self.assertEqual(User.objects.get(username="admin").role, "admin")
        self.assertEqual(User.objects.get(username="editor").role, "editor")
        self.assertEqual(Article.objects.count(), 3)
        self.assertEqual(Article.objects.filter(status="published").count(), 2)
        self.assertIn("CMS seed completed", out.getvalue())

    def test_seed_is_idempotent(self):
        call_command("seed_cms", stdout=StringIO())
        call_command("seed_cms", stdout=StringIO())

        self.assertEqual(User.objects.count(), 2)
        self.assertEqual(Article.objects.count(), 3)

    def test_seeded_password_works(self):
        call_command("seed_cms", "--password", "seedpass", stdout=StringIO())

        self.assertTrue(User.objects.get(username="admin").check_password("seedpass"))

    def test_reset_clears_demo_data(self):
        call_command("seed_cms", stdout=StringIO())
        Article.objects.filter(title="Release notes").delete()

        call_command("seed_cms", "--reset", stdout=StringIO())

        self.assertEqual(Article.objects.count(), 3)


class SetRoleCommandTests(TestCase):

    def test_promotes_editor(self):
        create_user("carol")

        call_command("set_role", "carol", "admin", stdout=StringIO())

        self.assertEqual(User.objects.get(username="carol").role, "admin")

    def test_unknown_user(self):
        with self.assertRaises(CommandError):
            call_command("set_role", "nobody", "admin", stdout=StringIO())

    def test_rejects_unknown_role(self):
        create_user("dave")

        with self.assertRaises(CommandError):
            call_command("set_role", "dave", "owner", stdout=StringIO())
