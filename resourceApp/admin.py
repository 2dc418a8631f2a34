from django.contrib import admin
from django.utils.html import format_html
from .models import Resource


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ['id', 'farmer', 'resource_type', 'used', 'optimal', 'unit', 'month', 'year', 'efficiency_display']
    list_filter = ['resource_type', 'month', 'year']
    search_fields = ['farmer__name', 'farmer__id']

    def efficiency_display(self, obj):
        efficiency = obj.efficiency
        status_colors = {
            'efficient': 'green',
            'warning': 'orange',
            'critical': 'red',
        }
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}%</span>',
            status_colors[efficiency.status], f"{efficiency.percentage:.0f}"
        )
    efficiency_display.short_description = "Efficiency"

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('farmer')
