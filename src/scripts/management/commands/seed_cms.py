"""Seed demo admin/editor accounts and sample articles."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from access_control.roles import Role
from articles.models import Article, ArticleStatus
from articles.policy import derive_slug
from authentication.managers import UserManager

DEMO_USERS = {
    "admin": Role.ADMIN,
    "editor": Role.EDITOR,
}

DEMO_ARTICLES = [
    ("admin", "Welcome to the CMS", "First published article.", ArticleStatus.PUBLISHED, ["news"]),
    ("admin", "Release notes", "What changed this week.", ArticleStatus.PUBLISHED, ["news", "release"]),
    ("editor", "Editor draft", "Waiting for an admin to publish.", ArticleStatus.DRAFT, ["draft"]),
]


def create_seed_users(password: str = "changeme") -> dict:
    """Create the demo accounts if missing and return a username->User map."""
    User = get_user_model()
    users = {}
    for username, role in DEMO_USERS.items():
        user, _ = User.objects.get_or_create(
            username=username,
            defaults={"role": role, "password_hash": UserManager.hash_password(password)},
        )
        users[username] = user
    return users


def create_seed_articles(users: dict) -> list:
    """Create the demo articles once, keyed by title."""
    articles = []
    for author, title, content, status, tags in DEMO_ARTICLES:
        article = Article.objects.filter(title=title, author=users[author]).first()
        if article is None:
            article = Article.objects.create(
                title=title,
                content=content,
                slug=derive_slug(title, lambda c: Article.objects.filter(slug=c).exists()),
                status=status,
                tags=tags,
                author=users[author],
            )
        articles.append(article)
    return articles


class Command(BaseCommand):
    """Management command to seed demo users and articles."""

    help = (
        "Seed an admin and an editor account plus sample articles. "
        "Use --reset to clear previously seeded data first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo users and their articles before seeding.",
        )
        parser.add_argument(
            "--password",
            default="changeme",
            help="Password assigned to newly created demo accounts.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            self._reset_seeded_data()

        self.stdout.write("Seeding CMS data...")
        users = create_seed_users(options["password"])
        articles = create_seed_articles(users)
        self.stdout.write(
            self.style.SUCCESS(f"CMS seed completed: {len(users)} users, {len(articles)} articles.")
        )

    def _reset_seeded_data(self) -> None:
        """Remove the demo accounts and the articles they authored."""
        self.stdout.write("Resetting previously seeded CMS data...")
        User = get_user_model()
        Article.objects.filter(author__username__in=list(DEMO_USERS)).delete()
        User.objects.filter(username__in=list(DEMO_USERS)).delete()
        self.stdout.write(self.style.WARNING("Seeded CMS data cleared."))
