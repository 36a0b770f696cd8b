from __future__ import annotations

from .services import OrderService


def build_order_service() -> OrderService:
    return OrderService()
