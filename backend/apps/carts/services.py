from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from apps.common import get_logger
from apps.common.errors import storage_guard
from apps.common.images import encode_images
from .commands import CartAddCommand, CartQuantityCommand
from .dtos import CartItemDTO
from .protocols import CartItemMapperProtocol, CartItemRepositoryProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """Operations on one cart, identified by ``cart_key``.

    Every operation is a single storage round trip (``add_item`` runs in one
    transaction). Database failures surface as ``StorageError``.
    """

    def __init__(
        self,
        cart_items: CartItemRepositoryProtocol,
        cart_mapper: CartItemMapperProtocol,
        cart_key: str,
    ):
        self.cart_items = cart_items
        self.cart_mapper = cart_mapper
        self.cart_key = cart_key
        self.logger = logger.bind(service="CartService", cart_key=cart_key)

    def list_items(self) -> List[CartItemDTO]:
        self.logger.debug("Listing cart items")
        with storage_guard("list cart", self.logger):
            return self.cart_mapper.many_to_dto(
                self.cart_items.list_for_cart(self.cart_key)
            )

    def add_item(
        self, data: Union[Dict[str, Any], CartAddCommand]
    ) -> Tuple[CartItemDTO, bool]:
        """Insert a product line or merge its quantity into the existing one.

        Returns ``(item, created)``.
        """
        cmd = data if isinstance(data, CartAddCommand) else CartAddCommand.from_raw(data)
        self.logger.info(
            "Adding product to cart", product_id=cmd.product_id, quantity=cmd.quantity
        )
        with storage_guard("add to cart", self.logger):
            item, created = self.cart_items.add_or_increment(
                self.cart_key,
                cmd.product_id,
                cmd.quantity,
                name=cmd.name,
                price=cmd.price,
                images=encode_images(cmd.images),
            )
        self.logger.info(
            "Cart line created" if created else "Cart line quantity merged",
            product_id=cmd.product_id,
            quantity=item.quantity,
        )
        return self.cart_mapper.to_dto(item), created

    def update_quantity(
        self, product_id: int, data: Union[Dict[str, Any], CartQuantityCommand]
    ) -> Optional[CartItemDTO]:
        """Replace the quantity of a line; ``None`` when the product is not in the cart."""
        cmd = (
            data
            if isinstance(data, CartQuantityCommand)
            else CartQuantityCommand.from_raw(product_id, data)
        )
        self.logger.info(
            "Updating cart quantity", product_id=cmd.product_id, quantity=cmd.quantity
        )
        with storage_guard("update cart quantity", self.logger):
            updated = self.cart_items.set_quantity(
                self.cart_key, cmd.product_id, cmd.quantity
            )
            if not updated:
                self.logger.warning(
                    "Cart quantity update failed: not found", product_id=cmd.product_id
                )
                return None
            item = self.cart_items.get_for_cart_product(self.cart_key, cmd.product_id)
        return self.cart_mapper.to_dto(item) if item else None

    def remove_item(self, product_id: int) -> bool:
        """Delete a line. Removing a product that is not in the cart is not an error."""
        self.logger.info("Removing product from cart", product_id=product_id)
        with storage_guard("remove from cart", self.logger):
            deleted = self.cart_items.delete_product(self.cart_key, product_id)
        if not deleted:
            self.logger.debug("Cart line already absent", product_id=product_id)
        return bool(deleted)

    def clear(self) -> int:
        self.logger.info("Clearing cart")
        with storage_guard("clear cart", self.logger):
            deleted = self.cart_items.delete_for_cart(self.cart_key)
        self.logger.info("Cart cleared", removed=deleted)
        return deleted
