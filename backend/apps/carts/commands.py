from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class CartAddCommand:
    product_id: int
    name: str
    price: int
    images: List[str] = field(default_factory=list)
    quantity: int = 1

    @staticmethod
    def from_raw(payload: Dict[str, Any]):
        """Build from validated request data; the product id arrives as ``id``."""
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a dict")
        pid = payload.get("id", payload.get("product_id"))
        if pid is None:
            raise ValueError("Product id is required")
        images = payload.get("images") or []
        return CartAddCommand(
            product_id=int(pid),
            name=str(payload.get("name", "")),
            price=int(payload.get("price", 0)),
            images=[str(i) for i in images],
            quantity=int(payload.get("quantity", 1)),
        )


@dataclass
class CartQuantityCommand:
    product_id: int
    quantity: int

    @staticmethod
    def from_raw(product_id: int, payload: Dict[str, Any]):
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a dict")
        return CartQuantityCommand(
            product_id=int(product_id), quantity=int(payload["quantity"])
        )
