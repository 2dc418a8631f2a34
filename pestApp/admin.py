from django.contrib import admin
from .models import PestDisease


@admin.register(PestDisease)
class PestDiseaseAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'type', 'crop_affected', 'severity']
    list_filter = ['type', 'severity', 'crop_affected']
    search_fields = ['name', 'crop_affected', 'treatment']
