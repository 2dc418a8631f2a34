from django.apps import AppConfig


class CropappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'cropApp'
    verbose_name = 'Crop Catalogue'
