from rest_framework import serializers
from .models import Resource


class ResourceSerializer(serializers.ModelSerializer):
    farmerId = serializers.CharField(source='farmer_id', allow_null=True, read_only=True)
    resourceType = serializers.CharField(source='resource_type')
    efficiency = serializers.SerializerMethodField()

    class Meta:
        model = Resource
        fields = ['id', 'farmerId', 'resourceType', 'used', 'optimal', 'unit', 'month', 'year', 'efficiency']
        read_only_fields = ['id']

    def get_efficiency(self, obj):
        efficiency = obj.efficiency
        return {
            'percentage': round(efficiency.percentage, 2),
            'status': efficiency.status,
        }
