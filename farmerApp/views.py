import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .context import resolve_farmer
from .serializers import FarmerSerializer

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def get_current_farmer(request):
    """ Return the farmer the request is acting for """
    try:
        farmer = resolve_farmer(request)
        return Response(FarmerSerializer(farmer).data)
    except Exception as e:
        logger.error(f"Error resolving current farmer: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch farmer"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
