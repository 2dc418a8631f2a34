import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import Advisory
from .serializers import AdvisorySerializer

logger = logging.getLogger(__name__)

RECENT_LIMIT = 3


def recent_advisories():
    return Advisory.objects.order_by('-timestamp', '-id')[:RECENT_LIMIT]


@api_view(['GET'])
@permission_classes([AllowAny])
def get_recent_advisories(request):
    """ Retrieve the newest advisories """
    try:
        serializer = AdvisorySerializer(recent_advisories(), many=True)
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error fetching recent advisories: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch advisories"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET'])
@permission_classes([AllowAny])
def get_all_advisories(request):
    """ Retrieve all advisories, newest first """
    try:
        advisories = Advisory.objects.order_by('-timestamp', '-id')
        serializer = AdvisorySerializer(advisories, many=True)
        logger.info(f"Retrieved {len(serializer.data)} advisories")
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error fetching all advisories: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch advisories"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
