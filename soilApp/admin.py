from django.contrib import admin
from .models import SoilAnalysis


@admin.register(SoilAnalysis)
class SoilAnalysisAdmin(admin.ModelAdmin):
    list_display = ['id', 'farmer', 'soil_type', 'nitrogen', 'phosphorus', 'potassium', 'ph', 'organic_matter', 'created_at']
    list_filter = ['soil_type', 'created_at']
    search_fields = ['farmer__name', 'recommendations']
    readonly_fields = ['recommendations', 'created_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('farmer')
