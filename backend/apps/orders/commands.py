from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class OrderSubmitCommand:
    items: List[Any] = field(default_factory=list)
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None

    @staticmethod
    def from_raw(payload: Any):
        """Accept whatever the client sent; orders are acknowledged, not validated."""
        data: Dict[str, Any] = payload if isinstance(payload, dict) else {}
        items = data.get("items")
        if items is None:
            items = []
        elif not isinstance(items, list):
            items = [items]
        return OrderSubmitCommand(
            items=items,
            customer_name=data.get("customerName", data.get("customer_name")),
            customer_phone=data.get("customerPhone", data.get("customer_phone")),
        )
