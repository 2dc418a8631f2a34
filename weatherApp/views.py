import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import WeatherData
from .serializers import WeatherDataSerializer

logger = logging.getLogger(__name__)


def latest_weather():
    return WeatherData.objects.order_by('-timestamp', '-id').first()


@api_view(['GET'])
@permission_classes([AllowAny])
def get_current_weather(request):
    """ Retrieve the most recent weather snapshot """
    try:
        weather = latest_weather()
        if weather is None:
            logger.warning("No weather data available")
            return Response(
                {"error": "Not found", "message": "No weather data available"},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(WeatherDataSerializer(weather).data)
    except Exception as e:
        logger.error(f"Error fetching weather: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch weather data"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
