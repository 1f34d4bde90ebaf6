"""
URL configuration for the taskflow project.

Every API route lives under ``/api/``; each app owns its own ``urls.py``.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from common.views import health

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", health, name="health"),

    # Accounts
    path("api/auth/", include("accounts.urls")),

    # Projects, tickets, comments, analytics
    path("api/", include("tracker.urls")),

    # OpenAPI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
