from rest_framework import serializers
from .models import Farmer


class FarmerSerializer(serializers.ModelSerializer):
    phoneNumber = serializers.CharField(source='phone_number', read_only=True)
    farmSize = serializers.FloatField(source='farm_size', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Farmer
        fields = ['id', 'name', 'location', 'language', 'phoneNumber', 'farmSize', 'createdAt']
        read_only_fields = fields
