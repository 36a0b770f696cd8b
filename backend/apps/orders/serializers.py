from rest_framework import serializers


class OrderRequestSerializer(serializers.Serializer):
    """Request shape for the schema; the endpoint does not validate it."""

    items = serializers.ListField(child=serializers.JSONField(), required=False)
    customerName = serializers.CharField(required=False, allow_blank=True)
    customerPhone = serializers.CharField(required=False, allow_blank=True)
