"""Serializers for Article reads and the create/update/publish payloads."""

from rest_framework import serializers

from authentication.serializers import AuthorSerializer
from .models import Article
from .services import ArticleUpdate


class ArticleSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True, allow_null=True)

    class Meta:
        """Read-only article payload with the author projected to username/role."""
        model = Article
        fields = [
            "id",
            "title",
            "content",
            "slug",
            "image_url",
            "status",
            "tags",
            "author",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ArticleCreateSerializer(serializers.Serializer):
    """Multipart or JSON create payload; ``tags`` is a comma-separated string."""

    title = serializers.CharField()
    content = serializers.CharField()
    tags = serializers.CharField(required=False, allow_blank=True, default="")
    # Unvalidated on purpose: the status gate decides what is stored.
    status = serializers.CharField(required=False, allow_blank=True, default=None, allow_null=True)
    image = serializers.FileField(required=False, allow_null=True, default=None)


class ArticleUpdateSerializer(serializers.Serializer):
    """Partial update payload; each field is optional and validated on its own."""

    # Blanks are accepted here and rejected below so form input reaches validation.
    title = serializers.CharField(required=False, allow_blank=True)
    content = serializers.CharField(required=False, allow_blank=True)
    tags = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True)
    image = serializers.FileField(required=False)

    def validate_title(self, value: str) -> str:
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value

    def validate_content(self, value: str) -> str:
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value

    def to_update(self) -> ArticleUpdate:
        """Build the partial-update structure from validated data."""
        return ArticleUpdate(**self.validated_data)


class PublishSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


__all__ = [
    "ArticleCreateSerializer",
    "ArticleSerializer",
    "ArticleUpdateSerializer",
    "PublishSerializer",
]
