"""Custom user manager handling bcrypt hashing and verification."""

import bcrypt
from django.conf import settings
from django.contrib.auth.base_user import BaseUserManager

from access_control.roles import Role

DEFAULT_BCRYPT_ROUNDS = 12


class UserManager(BaseUserManager):
    """Manager to create users with bcrypt password hashes."""

    use_in_migrations = True

    def _create_user(self, username: str, password: str, **extra_fields):
        username = (username or "").strip()
        if not username:
            raise ValueError("The username must be set")
        user = self.model(username=username, **extra_fields)
        user.password_hash = self.hash_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, username: str, password: str | None = None, **extra_fields):
        """Create an editor account with a bcrypt-hashed password."""
        extra_fields.setdefault("role", Role.EDITOR)
        if password is None:
            raise ValueError("Password must be provided")
        return self._create_user(username, password, **extra_fields)

    @staticmethod
    def hash_password(raw_password: str) -> str:
        """Hash a raw password using bcrypt and return the utf-8 string."""
        salt = bcrypt.gensalt(rounds=getattr(settings, "BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS))
        hashed = bcrypt.hashpw(raw_password.encode(), salt)
        return hashed.decode()

    @staticmethod
    def verify_password(user, raw_password: str) -> bool:
        """Verify raw password against stored bcrypt hash."""

        if not user.password_hash:
            return False
        return bcrypt.checkpw(raw_password.encode(), user.password_hash.encode("utf-8"))


__all__ = ["UserManager"]
