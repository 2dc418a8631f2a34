from django.db import models
from django.utils import timezone


class WeatherData(models.Model):
    # Location information
    location = models.CharField(max_length=255)

    # Current conditions
    temperature = models.FloatField(help_text="Temperature in °C")
    humidity = models.FloatField(null=True, blank=True, help_text="Relative humidity (%)")
    rainfall = models.FloatField(null=True, blank=True, help_text="Rainfall in mm")
    wind_speed = models.FloatField(null=True, blank=True, help_text="Wind speed in km/h")
    condition = models.CharField(max_length=100)

    # Upcoming days stored as JSON: [{"day": ..., "temp": ..., "condition": ...}]
    forecast = models.JSONField(default=list, blank=True)
    advisory = models.TextField(null=True, blank=True)

    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-timestamp', '-id']
        verbose_name_plural = 'weather data'

    def __str__(self):
        return f"Weather for {self.location} at {self.timestamp:%Y-%m-%d %H:%M}"
