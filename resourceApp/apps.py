from django.apps import AppConfig


class ResourceappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'resourceApp'
    verbose_name = 'Resource Usage'
