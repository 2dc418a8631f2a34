from django.apps import AppConfig


class FarmerappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'farmerApp'
    verbose_name = 'Farmers'
