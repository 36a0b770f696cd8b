from django.urls import path, include, re_path
from django.conf import settings
from apps.common.views import live_health, ready_health, index, public_file
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

urlpatterns = [
    path("api/", include("apps.api.urls")),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]

# Schema and interactive docs are only exposed while developing.
if settings.DEBUG:
    urlpatterns += [
        path("schema/", SpectacularAPIView.as_view(), name="schema"),
        path(
            "docs/swagger/",
            SpectacularSwaggerView.as_view(url_name="schema"),
            name="swagger-ui",
        ),
        path(
            "docs/redoc/",
            SpectacularRedocView.as_view(url_name="schema"),
            name="redoc",
        ),
    ]

# Front-end bundle; must stay last so it never shadows API routes.
urlpatterns += [
    path("", index, name="index"),
    re_path(r"^(?P<path>(?!api/).+)$", public_file, name="public-file"),
]
