from django.apps import AppConfig


class AdvisoryappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'advisoryApp'
    verbose_name = 'Advisories'
