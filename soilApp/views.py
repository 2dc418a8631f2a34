import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from assistantApp.gateway import AIGatewayError
from farmerApp.context import resolve_farmer
from .serializers import SoilAnalysisRequestSerializer, SoilAnalysisSerializer
from .services import run_soil_analysis

logger = logging.getLogger(__name__)


def first_error_message(errors):
    """Flatten DRF serializer errors into one readable message."""
    for field, messages in errors.items():
        message = messages[0] if isinstance(messages, list) and messages else messages
        if field == 'soilType':
            return str(message)
        return f"{field}: {message}"
    return "Invalid soil data"


@api_view(['POST'])
@permission_classes([AllowAny])
def analyze_soil_sample(request):
    """ Analyze a soil sample with the AI assistant and store the result """
    try:
        serializer = SoilAnalysisRequestSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Soil analysis validation error: {serializer.errors}")
            return Response(
                {"error": "Invalid data", "message": first_error_message(serializer.errors)},
                status=status.HTTP_400_BAD_REQUEST
            )

        farmer = resolve_farmer(request)
        analysis = run_soil_analysis(farmer, serializer.validated_data)
        return Response(SoilAnalysisSerializer(analysis).data)

    except AIGatewayError as e:
        logger.error(f"Error analyzing soil: {str(e)}")
        return Response(
            {"error": "Upstream failure", "message": "Failed to analyze soil"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    except Exception as e:
        logger.error(f"Error analyzing soil: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to analyze soil"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
