from rest_framework.views import APIView
from rest_framework.response import Response
from .container import build_cart_service
from .serializers import (
    CartItemReadSerializer,
    CartItemWriteSerializer,
    CartQuantitySerializer,
)
from apps.api.exceptions import ApplicationError
from apps.api.utils import message_response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from apps.api.schemas import ErrorResponseSerializer, MessageResponseSerializer
from apps.common import get_logger

logger = get_logger(__name__).bind(component="carts", layer="view")

MESSAGE_ADDED = "Item added to cart"
MESSAGE_QUANTITY_UPDATED = "Item quantity updated"
MESSAGE_REMOVED = "Item removed from cart"
MESSAGE_CLEARED = "Cart cleared"

_errors = {
    400: OpenApiResponse(response=ErrorResponseSerializer),
    500: OpenApiResponse(response=ErrorResponseSerializer),
}


@extend_schema(tags=["Cart"])
class CartView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="Get cart contents",
        responses={200: CartItemReadSerializer(many=True), 500: _errors[500]},
    )
    def get(self, request):
        data = self.service.list_items()
        self.log.debug("Cart listed", items=len(data))
        return Response(CartItemReadSerializer(data, many=True).data)

    @extend_schema(
        summary="Add product to cart",
        description=(
            "Adds a product line. If the product is already in the cart its quantity "
            "is increased by the given amount; the stored name, price and images "
            "are kept."
        ),
        request=CartItemWriteSerializer,
        responses={200: MessageResponseSerializer, **_errors},
    )
    def post(self, request):
        serializer = CartItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto, created = self.service.add_item(dict(serializer.validated_data))
        self.log.info(
            "Cart add handled via API",
            product_id=dto.id,
            quantity=dto.quantity,
            created=created,
        )
        return message_response(MESSAGE_ADDED if created else MESSAGE_QUANTITY_UPDATED)


@extend_schema(tags=["Cart"])
class CartClearView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartClearView")

    @extend_schema(
        summary="Clear cart",
        responses={200: MessageResponseSerializer, 500: _errors[500]},
    )
    def delete(self, request):
        removed = self.service.clear()
        self.log.info("Cart cleared via API", removed=removed)
        return message_response(MESSAGE_CLEARED)


@extend_schema(tags=["Cart"])
class CartItemView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartItemView")

    @extend_schema(
        summary="Set product quantity",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        request=CartQuantitySerializer,
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
            **_errors,
        },
    )
    def put(self, request, product_id: int):
        product_id = int(product_id)
        serializer = CartQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.service.update_quantity(product_id, dict(serializer.validated_data))
        if not dto:
            self.log.info("Cart quantity update for absent product", product_id=product_id)
            raise ApplicationError(
                "NOT_FOUND", "Cart item not found", details={"id": str(product_id)}
            )
        return message_response(MESSAGE_QUANTITY_UPDATED)

    @extend_schema(
        summary="Remove product from cart",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={200: MessageResponseSerializer, 500: _errors[500]},
    )
    def delete(self, request, product_id: int):
        product_id = int(product_id)
        self.service.remove_item(product_id)
        return message_response(MESSAGE_REMOVED)
