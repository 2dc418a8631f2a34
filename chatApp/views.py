import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from assistantApp.gateway import AIGatewayError
from farmerApp.context import resolve_farmer
from .serializers import CONTENT_REQUIRED, ChatMessageRequestSerializer, ChatMessageSerializer
from .services import chat_history, send_chat_message

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def get_chat_messages(request):
    """ Retrieve the chat transcript for the current farmer, oldest first """
    try:
        farmer = resolve_farmer(request)
        serializer = ChatMessageSerializer(chat_history(farmer), many=True)
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error fetching chat messages: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch messages"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['POST'])
@permission_classes([AllowAny])
def post_chat_message(request):
    """ Send a message to the AI assistant and store both sides of the exchange """
    try:
        serializer = ChatMessageRequestSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Chat message rejected: {serializer.errors}")
            return Response(
                {"error": "Missing required field", "message": CONTENT_REQUIRED},
                status=status.HTTP_400_BAD_REQUEST
            )

        farmer = resolve_farmer(request)
        user_message, assistant_message = send_chat_message(
            farmer, serializer.validated_data["content"], serializer.validated_data.get("language")
        )
        return Response({
            "userMessage": ChatMessageSerializer(user_message).data,
            "assistantMessage": ChatMessageSerializer(assistant_message).data,
        })

    except AIGatewayError as e:
        logger.error(f"Error in chat: {str(e)}")
        return Response(
            {"error": "Upstream failure", "message": "Failed to process chat message"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    except Exception as e:
        logger.error(f"Error in chat: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to process chat message"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
