from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()
    details = serializers.JSONField(required=False)


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
