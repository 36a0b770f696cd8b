from rest_framework import serializers

from .dtos import ProductDTO, CategoryDTO


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField()

    def to_representation(self, instance):
        if instance is None:
            return None
        if isinstance(instance, CategoryDTO):
            return {"id": instance.id, "name": instance.name}
        return super().to_representation(instance)


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO shapes used for responses
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.IntegerField()
    images = serializers.ListField(child=serializers.CharField())
    category = serializers.CharField(allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        # Dataclass DTOs are already in response shape
        if isinstance(instance, ProductDTO):
            return {
                "id": instance.id,
                "name": instance.name,
                "description": instance.description,
                "price": instance.price,
                "images": list(instance.images),
                "category": instance.category,
            }
        return super().to_representation(instance)

