from __future__ import annotations

from typing import Any, Union

from apps.common import get_logger
from .commands import OrderSubmitCommand

logger = get_logger(__name__).bind(component="orders", layer="service")


class OrderService:
    """Order intake placeholder.

    Orders are logged for operators and acknowledged. Nothing is persisted and
    stock is not touched; a real implementation plugs an order store in here.
    """

    def __init__(self):
        self.logger = logger.bind(service="OrderService")

    def submit(self, data: Union[Any, OrderSubmitCommand]) -> OrderSubmitCommand:
        cmd = data if isinstance(data, OrderSubmitCommand) else OrderSubmitCommand.from_raw(data)
        self.logger.info(
            "Order received",
            customer_name=cmd.customer_name,
            customer_phone=cmd.customer_phone,
            item_count=len(cmd.items),
            items=cmd.items,
        )
        return cmd
