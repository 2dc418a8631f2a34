from rest_framework import serializers
from .models import Advisory


class AdvisorySerializer(serializers.ModelSerializer):
    farmerId = serializers.CharField(source='farmer_id', allow_null=True, read_only=True)

    class Meta:
        model = Advisory
        fields = ['id', 'farmerId', 'title', 'content', 'category', 'severity', 'timestamp', 'source']
        read_only_fields = ['id', 'timestamp']
