from django.apps import AppConfig


class PestappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'pestApp'
    verbose_name = 'Pests & Diseases'
