from django.urls import path, include, re_path
from apps.common.views import api_not_found

urlpatterns = [
    path("", include("apps.catalog.urls")),
    # Cart routes: "cart/clear" is declared before "cart/<product_id>"
    path("", include("apps.carts.urls")),
    path("", include("apps.orders.urls")),
    re_path(r"^(?P<path>.*)$", api_not_found, name="api-not-found"),
]
