from typing import Optional

from apps.common.repository import GenericRepository
from .models import Category, Product


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def _base_queryset(self):
        return self.model.objects.select_related("category")

    def search(
        self,
        *,
        name_contains: Optional[str] = None,
        category_name: Optional[str] = None,
    ):
        """Products joined to their category, narrowed by the given filters (AND)."""
        qs = self._base_queryset()
        if name_contains:
            qs = qs.filter(name__contains=name_contains)
        if category_name:
            qs = qs.filter(category__name=category_name)
        return qs.order_by("id")
