"""
Project URLs.

All API routes live under /api/:
- /api/pos          POS create / list / update
- /api/health/      DB connectivity check
- /api/schema/      OpenAPI schema, /api/docs/ Swagger UI
"""

import logging

from django.contrib import admin
from django.db import connections
from django.db.utils import OperationalError
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view
from rest_framework.response import Response

logger = logging.getLogger(__name__)


@api_view(["GET"])
def api_root(request):
    return Response(
        {
            "message": "Welcome to the CampusCoffee API!",
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
            "modules": {
                "pos": "/api/pos",
                "health": "/api/health/",
            },
        }
    )


@api_view(["GET"])
def health_check(request):
    """Confirm the app responds and the database answers a trivial query."""
    try:
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except OperationalError as e:
        logger.error(f"Health check failed: {e}")
        return Response({"status": "degraded", "db": "down", "error": str(e)}, status=503)

    return Response({"status": "ok", "db": "ok"})


api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("", include("apps.pos.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include(api_urlpatterns)),
]
