from django.apps import AppConfig


class SoilappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'soilApp'
    verbose_name = 'Soil Analysis'
