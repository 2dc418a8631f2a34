from rest_framework import serializers
from .models import ChatMessage

CONTENT_REQUIRED = "Message content is required"


class ChatMessageRequestSerializer(serializers.Serializer):
    """Validates the body of a chat message request."""
    content = serializers.CharField(allow_blank=False, trim_whitespace=True,
                                    error_messages={'required': CONTENT_REQUIRED,
                                                    'blank': CONTENT_REQUIRED,
                                                    'null': CONTENT_REQUIRED})
    language = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ChatMessageSerializer(serializers.ModelSerializer):
    farmerId = serializers.CharField(source='farmer_id', allow_null=True, read_only=True)

    class Meta:
        model = ChatMessage
        fields = ['id', 'farmerId', 'role', 'content', 'timestamp', 'language']
        read_only_fields = fields
