"""Article endpoints: public reads, token-guarded writes, admin-only publish."""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from access_control.permissions import IsAdminRole, IsAuthenticatedIdentity
from core.response import message_response
from . import services
from .models import Article, ArticleStatus
from .serializers import (
    ArticleCreateSerializer,
    ArticleSerializer,
    ArticleUpdateSerializer,
    PublishSerializer,
)

PUBLIC_ACTIONS = {"list", "retrieve", "by_slug"}


class ArticleViewSet(viewsets.GenericViewSet):
    serializer_class = ArticleSerializer
    queryset = Article.objects.select_related("author")
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    lookup_value_regex = r"\d+"

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        if self.action == "publish":
            return [IsAdminRole()]
        return [IsAuthenticatedIdentity()]

    @extend_schema(
        parameters=[OpenApiParameter("status", str, enum=ArticleStatus.values, required=False)],
        responses=ArticleSerializer(many=True),
    )
    def list(self, request):
        """All articles newest first, optionally filtered by exact status."""
        articles = services.list_articles(request.query_params.get("status"))
        return Response({"articles": ArticleSerializer(articles, many=True).data})

    def retrieve(self, request, pk=None):
        return Response(ArticleSerializer(services.get_article(pk)).data)

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[^/]+)")
    def by_slug(self, request, slug=None):
        return Response(ArticleSerializer(services.get_article_by_slug(slug)).data)

    @extend_schema(request=ArticleCreateSerializer, responses={201: ArticleSerializer})
    def create(self, request):
        """Create an article; editors' requests for ``published`` become drafts."""
        serializer = ArticleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        article = services.create_article(request.user, **serializer.validated_data)
        return message_response(
            "Article created successfully",
            status=status.HTTP_201_CREATED,
            article=ArticleSerializer(article).data,
        )

    @extend_schema(request=ArticleUpdateSerializer, responses=ArticleSerializer)
    def update(self, request, pk=None):
        """Change only the fields present in the request."""
        serializer = ArticleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        article = services.update_article(pk, request.user, serializer.to_update())
        return message_response("Article updated successfully", article=ArticleSerializer(article).data)

    def destroy(self, request, pk=None):
        services.delete_article(pk)
        return message_response("Article deleted successfully")

    @extend_schema(request=PublishSerializer, responses=ArticleSerializer)
    @action(detail=True, methods=["patch"])
    def publish(self, request, pk=None):
        """Admin-only switch between ``draft`` and ``published``."""
        serializer = PublishSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        article = services.set_publication_status(pk, request.user, serializer.validated_data["status"])
        verb = "published" if article.is_published else "set to draft"
        return message_response(f"Article {verb} successfully", article=ArticleSerializer(article).data)


__all__ = ["ArticleViewSet"]
