from rest_framework import serializers

from .dtos import CartItemDTO
from .models import MAX_QUANTITY, PRICE_MAX, PRODUCT_ID_MAX


class CartItemReadSerializer(serializers.Serializer):
    # ``id`` is the product id, not the row id
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.IntegerField()
    images = serializers.ListField(child=serializers.CharField())
    quantity = serializers.IntegerField()

    def to_representation(self, instance):
        if instance is None:
            return None
        if isinstance(instance, CartItemDTO):
            return {
                "id": instance.id,
                "name": instance.name,
                "price": instance.price,
                "images": list(instance.images),
                "quantity": instance.quantity,
            }
        return super().to_representation(instance)


class CartItemWriteSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=1, max_value=PRODUCT_ID_MAX)
    name = serializers.CharField(max_length=255)
    price = serializers.IntegerField(min_value=0, max_value=PRICE_MAX)
    images = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    quantity = serializers.IntegerField(
        min_value=1, max_value=MAX_QUANTITY, required=False, default=1
    )


class CartQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
