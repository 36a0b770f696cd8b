from rest_framework.views import APIView
from rest_framework.response import Response
from .container import build_product_service, build_category_service
from .serializers import ProductReadSerializer, CategorySerializer
from .pagination import ProductListPagination
from apps.common import get_logger
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from apps.api.schemas import ErrorResponseSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description=(
            "Filters by category name and name substring; both combine with AND. "
            "'all' and 'Все' mean no category filter. Paged with ?offset and ?limit "
            "(default 6); the total match count is returned in X-Total-Count."
        ),
        parameters=[
            OpenApiParameter(
                name="category",
                description="Filter by category name",
                required=False,
                type=str,
            ),
            OpenApiParameter(
                name="search",
                description="Substring of the product name",
                required=False,
                type=str,
            ),
            OpenApiParameter(name="offset", required=False, type=int),
            OpenApiParameter(name="limit", required=False, type=int),
        ],
        responses={
            200: ProductReadSerializer(many=True),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        category = request.query_params.get("category")
        search = request.query_params.get("search")
        self.log.debug(
            "Handling product list request", category=category, search=search
        )
        return self.service.list_products_paginated(
            request,
            category=category,
            search=search,
            paginator_class=ProductListPagination,
            serializer_class=ProductReadSerializer,
            view=self,
        )


@extend_schema(tags=["Catalog"])
class CategoryListView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        summary="List categories",
        responses={
            200: CategorySerializer(many=True),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        self.log.debug("Listing categories")
        data = self.service.list_categories()
        return Response(CategorySerializer(data, many=True).data)
