from rest_framework import serializers
from .models import SoilAnalysis


class SoilAnalysisRequestSerializer(serializers.Serializer):
    """Validates the body of a soil analysis request."""
    soilType = serializers.CharField(source='soil_type', max_length=50, allow_blank=False, trim_whitespace=True,
                                     error_messages={'required': 'Soil type is required',
                                                     'blank': 'Soil type is required',
                                                     'null': 'Soil type is required'})
    nitrogen = serializers.FloatField(min_value=0, max_value=100, required=False, allow_null=True)
    phosphorus = serializers.FloatField(min_value=0, max_value=100, required=False, allow_null=True)
    potassium = serializers.FloatField(min_value=0, max_value=100, required=False, allow_null=True)
    ph = serializers.FloatField(min_value=0, max_value=14, required=False, allow_null=True)
    organicMatter = serializers.FloatField(source='organic_matter', min_value=0, max_value=100,
                                           required=False, allow_null=True)


class SoilAnalysisSerializer(serializers.ModelSerializer):
    farmerId = serializers.CharField(source='farmer_id', allow_null=True, read_only=True)
    soilType = serializers.CharField(source='soil_type')
    organicMatter = serializers.FloatField(source='organic_matter', allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = SoilAnalysis
        fields = [
            'id', 'farmerId', 'soilType', 'nitrogen', 'phosphorus', 'potassium',
            'ph', 'organicMatter', 'recommendations', 'createdAt'
        ]
        read_only_fields = fields
