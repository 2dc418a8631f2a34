import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import Crop
from .serializers import CropSerializer

logger = logging.getLogger(__name__)

RECOMMENDED_LIMIT = 4


def recommended_crops():
    return Crop.objects.all()[:RECOMMENDED_LIMIT]


@api_view(['GET'])
@permission_classes([AllowAny])
def get_recommended_crops(request):
    """ Retrieve the crops shown on the dashboard """
    try:
        serializer = CropSerializer(recommended_crops(), many=True)
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error fetching crops: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch crops"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET'])
@permission_classes([AllowAny])
def get_all_crops(request):
    """ Retrieve all crops """
    try:
        crops = Crop.objects.all()
        serializer = CropSerializer(crops, many=True)
        logger.info(f"Retrieved {len(serializer.data)} crops")
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error fetching all crops: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch crops"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
