from django.apps import AppConfig


class WeatherappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'weatherApp'
    verbose_name = 'Weather'
