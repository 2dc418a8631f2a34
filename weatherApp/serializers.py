from rest_framework import serializers
from .models import WeatherData


class WeatherDataSerializer(serializers.ModelSerializer):
    windSpeed = serializers.FloatField(source='wind_speed', allow_null=True)
    forecast = serializers.JSONField()

    class Meta:
        model = WeatherData
        fields = [
            'id', 'location', 'temperature', 'humidity', 'rainfall', 'windSpeed',
            'condition', 'forecast', 'advisory', 'timestamp'
        ]
        read_only_fields = ['id', 'timestamp']
