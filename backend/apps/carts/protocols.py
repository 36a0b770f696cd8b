from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Tuple, TYPE_CHECKING

from .models import CartItem

if TYPE_CHECKING:
    from apps.carts.dtos import CartItemDTO


class CartItemRepositoryProtocol(Protocol):
    def list_for_cart(self, cart_key: str) -> Iterable[CartItem]:
        ...

    def get_for_cart_product(self, cart_key: str, product_id: int) -> Optional[CartItem]:
        ...

    def add_or_increment(
        self, cart_key: str, product_id: int, quantity: int, **snapshot
    ) -> Tuple[CartItem, bool]:
        ...

    def set_quantity(self, cart_key: str, product_id: int, quantity: int) -> int:
        ...

    def delete_product(self, cart_key: str, product_id: int) -> int:
        ...

    def delete_for_cart(self, cart_key: str) -> int:
        ...


class CartItemMapperProtocol(Protocol):
    def to_dto(self, item: CartItem) -> "CartItemDTO":
        ...

    def many_to_dto(self, items: Iterable[CartItem]) -> List["CartItemDTO"]:
        ...
