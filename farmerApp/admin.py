from django.contrib import admin
from .models import Farmer


@admin.register(Farmer)
class FarmerAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'location', 'language', 'farm_size', 'user', 'created_at']
    list_filter = ['language', 'created_at']
    search_fields = ['id', 'name', 'location', 'phone_number']
    readonly_fields = ['created_at']
