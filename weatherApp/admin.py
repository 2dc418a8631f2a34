from django.contrib import admin
from .models import WeatherData


@admin.register(WeatherData)
class WeatherDataAdmin(admin.ModelAdmin):
    list_display = ['id', 'location', 'temperature', 'humidity', 'rainfall', 'wind_speed', 'condition', 'timestamp']
    list_filter = ['condition', 'timestamp']
    search_fields = ['location', 'advisory']
