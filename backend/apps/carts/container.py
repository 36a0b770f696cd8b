from __future__ import annotations

from typing import Optional

from django.conf import settings

from .mappers import CartItemMapper
from .repositories import CartItemRepository
from .services import CartService


def build_cart_service(cart_key: Optional[str] = None) -> CartService:
    return CartService(
        cart_items=CartItemRepository(),
        cart_mapper=CartItemMapper(),
        cart_key=cart_key or settings.CART_DEFAULT_KEY,
    )
