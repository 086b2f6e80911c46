"""Root URL configuration for the Article CMS API."""
from django.conf import settings
from django.http import JsonResponse
from django.urls import include, path, re_path
from django.views.static import serve
from drf_spectacular.views import SpectacularAPIView


def health(request):
    """Root endpoint used as a liveness probe."""
    return JsonResponse({"message": "API is running"})


def not_found(request, exception):
    """JSON body for URLs no route matches."""
    return JsonResponse({"error": "Not found"}, status=404)


handler404 = not_found


urlpatterns = [
    path("", health, name="health"),
    path("schema", SpectacularAPIView.as_view(), name="schema"),
    path("auth/", include("authentication.urls")),
    path("", include("articles.urls")),
    re_path(
        r"^uploads/(?P<path>[^/]+)$",
        serve,
        {"document_root": settings.MEDIA_ROOT},
        name="uploads",
    ),
]
