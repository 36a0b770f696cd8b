from django.urls import re_path
from .views import OrderView

urlpatterns = [
    re_path(r"^order/?$", OrderView.as_view(), name="api-order"),
]
