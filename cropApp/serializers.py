from rest_framework import serializers
from .models import Crop


class CropSerializer(serializers.ModelSerializer):
    soilType = serializers.CharField(source='soil_type')
    waterRequirement = serializers.CharField(source='water_requirement')
    expectedYield = serializers.FloatField(source='expected_yield', allow_null=True)
    profitEstimate = serializers.FloatField(source='profit_estimate', allow_null=True)
    growthDuration = serializers.IntegerField(source='growth_duration', allow_null=True)

    class Meta:
        model = Crop
        fields = [
            'id', 'name', 'season', 'soilType', 'waterRequirement',
            'expectedYield', 'profitEstimate', 'growthDuration', 'description'
        ]
        read_only_fields = ['id']
