from rest_framework.views import APIView
from .container import build_order_service
from .serializers import OrderRequestSerializer
from apps.api.utils import message_response
from drf_spectacular.utils import extend_schema, OpenApiResponse
from apps.api.schemas import ErrorResponseSerializer, MessageResponseSerializer
from apps.common import get_logger

logger = get_logger(__name__).bind(component="orders", layer="view")

MESSAGE_ORDER_PLACED = "Order placed"


@extend_schema(tags=["Orders"])
class OrderView(APIView):
    service = build_order_service()
    log = logger.bind(view="OrderView")

    @extend_schema(
        summary="Submit order",
        description="Acknowledges the order. Orders are logged, not stored.",
        request=OrderRequestSerializer,
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        cmd = self.service.submit(request.data)
        self.log.debug("Order acknowledged", item_count=len(cmd.items))
        return message_response(MESSAGE_ORDER_PLACED)
