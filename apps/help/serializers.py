from rest_framework import serializers


class ContactMessageSerializer(serializers.Serializer):
    """Contact form submission. Only the message is required."""

    message = serializers.CharField()
    email = serializers.EmailField(required=False, allow_blank=True, default="")
