"""Serializers for authentication flows (register, login)."""

import logging
from typing import cast

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from access_control.roles import Role

from .managers import UserManager

User = get_user_model()

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6


class CredentialsSerializer(serializers.Serializer):
    """Username/password pair with the length rules shared by both flows."""

    username = serializers.CharField(min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH)
    password = serializers.CharField(write_only=True, min_length=PASSWORD_MIN_LENGTH, trim_whitespace=False)


class RegisterSerializer(CredentialsSerializer):
    """Validate and create a user; public registration always yields an editor."""

    @staticmethod
    def validate_username(value):
        """Ensure username is unique before creation."""
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def create(self, validated_data):
        """Create an editor account with a hashed password."""
        manager = cast(UserManager, User.objects)
        user = manager.create_user(role=Role.EDITOR, **validated_data)
        logger.info("Registered user %s", user.username)
        return user


class LoginSerializer(CredentialsSerializer):
    """Authenticate a user via username/password using bcrypt verification."""

    def validate(self, attrs):
        """Authenticate credentials and attach the user to validated_data."""
        username = attrs.get("username")
        password = attrs.get("password")
        user = User.objects.filter(username=username).first()
        if user is None or not user.is_active or not UserManager.verify_password(user, password):
            logger.info("Failed login for %s", username)
            raise AuthenticationFailed("Invalid credentials")

        attrs["user"] = user
        return attrs


class AuthorSerializer(serializers.ModelSerializer):
    """Public projection of a user embedded in article payloads."""

    class Meta:
        model = User
        fields = ["username", "role"]
        read_only_fields = fields


__all__ = ["RegisterSerializer", "LoginSerializer", "AuthorSerializer"]
