from django.urls import re_path
from .views import CartView, CartClearView, CartItemView

urlpatterns = [
    re_path(r"^cart/?$", CartView.as_view(), name="api-cart"),
    # "clear" must be matched before the product route
    re_path(r"^cart/clear/?$", CartClearView.as_view(), name="api-cart-clear"),
    re_path(
        r"^cart/(?P<product_id>\d+)/?$", CartItemView.as_view(), name="api-cart-item"
    ),
]
