import logging

from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import PestDisease
from .serializers import PestDiseaseSerializer

logger = logging.getLogger(__name__)


def search_pests_diseases(term=None):
    """Match the term against pest/disease name or the crop it affects."""
    queryset = PestDisease.objects.all()
    term = (term or '').strip()
    if term:
        queryset = queryset.filter(Q(name__icontains=term) | Q(crop_affected__icontains=term))
    return queryset


@api_view(['GET'])
@permission_classes([AllowAny])
def get_pests_diseases(request):
    """ Retrieve pests and diseases, optionally filtered by ?search= """
    try:
        pests = search_pests_diseases(request.GET.get('search'))
        serializer = PestDiseaseSerializer(pests, many=True)
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error fetching pests and diseases: {str(e)}")
        return Response(
            {"error": "Server error", "message": "Failed to fetch pests and diseases"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
