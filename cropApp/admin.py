from django.contrib import admin
from .models import Crop


@admin.register(Crop)
class CropAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'season', 'soil_type', 'water_requirement', 'expected_yield', 'profit_estimate']
    list_filter = ['season', 'soil_type', 'water_requirement']
    search_fields = ['name', 'description']
