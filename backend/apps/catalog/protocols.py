from __future__ import annotations

from typing import Iterable, Optional, Protocol

from .models import Category, Product


class CategoryRepositoryProtocol(Protocol):
    def list(self, **filters) -> Iterable[Category]:
        ...


class ProductRepositoryProtocol(Protocol):
    def search(
        self,
        *,
        name_contains: Optional[str] = None,
        category_name: Optional[str] = None,
    ) -> Iterable[Product]:
        ...
