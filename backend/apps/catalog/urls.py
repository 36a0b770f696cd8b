from django.urls import re_path
from .views import ProductListView, CategoryListView

urlpatterns = [
    re_path(r"^products/?$", ProductListView.as_view(), name="api-products-list"),
    re_path(r"^categories/?$", CategoryListView.as_view(), name="api-categories-list"),
]
