from typing import Iterable, List

from apps.common.images import decode_images

from .dtos import CartItemDTO
from .models import CartItem


class CartItemMapper:
    def to_dto(self, item: CartItem) -> CartItemDTO:
        return CartItemDTO(
            id=item.product_id,
            name=item.name,
            price=item.price,
            images=decode_images(item.images, product_id=item.product_id),
            quantity=item.quantity,
        )

    def many_to_dto(self, items: Iterable[CartItem]) -> List[CartItemDTO]:
        return [self.to_dto(i) for i in items]
