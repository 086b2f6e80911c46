"""Change a user's role; the only way to grant or revoke admin."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from access_control.roles import Role


class Command(BaseCommand):
    help = "Set the role of an existing user (admin or editor)."

    def add_arguments(self, parser):
        parser.add_argument("username")
        parser.add_argument("role", choices=Role.values)

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(username=options["username"])
        except User.DoesNotExist:
            raise CommandError(f"User {options['username']!r} does not exist")

        user.role = options["role"]
        user.save(update_fields=["role", "updated_at"])
        # Tokens issued earlier keep their old role claim until they expire.
        self.stdout.write(self.style.SUCCESS(f"{user.username} is now {user.role}."))
