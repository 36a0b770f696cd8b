from __future__ import annotations

from typing import Any, Mapping, Optional, Type, Union

from rest_framework.pagination import BasePagination
from rest_framework.response import Response

from apps.common import get_logger
from apps.common.errors import storage_guard
from .commands import ProductFilterCommand
from .mappers import ProductMapper, CategoryMapper
from .protocols import CategoryRepositoryProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def products_queryset(
        self, category: Optional[str] = None, search: Optional[str] = None
    ):
        """Return the filtered product query; sentinel categories mean no filter."""
        category = ProductFilterCommand.normalize_category(category)
        search = ProductFilterCommand.normalize_search(search)
        self.logger.debug(
            "Building product queryset", category=category, search=search
        )
        return self.products.search(name_contains=search, category_name=category)

    def list_products(
        self,
        data: Union[Mapping[str, Any], ProductFilterCommand, None] = None,
        **filters: Any,
    ):
        cmd = (
            data
            if isinstance(data, ProductFilterCommand)
            else ProductFilterCommand.from_raw({**(data or {}), **filters})
        )
        self.logger.debug(
            "Listing products",
            category=cmd.category,
            search=cmd.search,
            offset=cmd.offset,
            limit=cmd.limit,
        )
        with storage_guard("list products", self.logger):
            qs = self.products.search(
                name_contains=cmd.search, category_name=cmd.category
            )
            page = qs[cmd.offset : cmd.offset + cmd.limit]
            return ProductMapper.many_to_dto(page)

    def list_products_paginated(
        self,
        request,
        *,
        category: Optional[str] = None,
        search: Optional[str] = None,
        paginator_class: Type[BasePagination],
        serializer_class=None,
        view=None,
    ):
        paginator = paginator_class()
        with storage_guard("list products", self.logger):
            queryset = self.products_queryset(category=category, search=search)
            page = paginator.paginate_queryset(queryset, request, view=view)
            data_source = page if page is not None else queryset
            dtos = ProductMapper.many_to_dto(data_source)
        if serializer_class is None:
            from .serializers import ProductReadSerializer  # Avoid circular import

            serializer_class = ProductReadSerializer
        serializer = serializer_class(dtos, many=True)
        self.logger.debug("Products listed", returned=len(dtos))
        if page is None:
            return Response(serializer.data)
        return paginator.get_paginated_response(serializer.data)


class CategoryService:
    def __init__(self, categories: CategoryRepositoryProtocol):
        self.categories = categories
        self.logger = logger.bind(service="CategoryService")

    def list_categories(self):
        self.logger.debug("Listing categories")
        with storage_guard("list categories", self.logger):
            return CategoryMapper.many_to_dto(self.categories.list())
