from rest_framework import serializers
from .models import PestDisease


class PestDiseaseSerializer(serializers.ModelSerializer):
    cropAffected = serializers.CharField(source='crop_affected')
    symptoms = serializers.ListField(child=serializers.CharField())
    imageUrl = serializers.URLField(source='image_url', allow_null=True, required=False)

    class Meta:
        model = PestDisease
        fields = ['id', 'name', 'type', 'cropAffected', 'symptoms', 'severity', 'treatment', 'prevention', 'imageUrl']
        read_only_fields = ['id']
