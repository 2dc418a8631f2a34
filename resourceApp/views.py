import calendar
import logging

from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from farmerApp.context import resolve_farmer
from .models import Resource
from .serializers import ResourceSerializer

logger = logging.getLogger(__name__)


def current_period(now=None):
    """Return the (month name, year) pair resources are reported under."""
    now = timezone.localtime(now or timezone.now())
    return calendar.month_name[now.month], now.year


def current_resources(farmer, now=None):
    month, year = current_period(now)
    return Resource.objects.filter(farmer=farmer, month=month, year=year).order_by('id')


@api_view(['GET'])
@permission_classes([AllowAny])
def get_current_resources(request):
    """ Retrieve this month's resource usage for the current farmer """
    try:
        farmer = resolve_farmer(request)
        serializer = ResourceSerializer(current_resources(farmer), many=True)
        logger.info(f"Retrieved {len(serializer.data)} resources for farmer {farmer.id}")
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error fetching resources: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch resources"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
