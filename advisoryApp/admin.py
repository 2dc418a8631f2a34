from django.contrib import admin
from django.utils.html import format_html
from .models import Advisory


@admin.register(Advisory)
class AdvisoryAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'category', 'severity_display', 'farmer', 'source', 'timestamp']
    list_filter = ['severity', 'category', 'timestamp']
    search_fields = ['title', 'content', 'source']

    def severity_display(self, obj):
        severity_colors = {
            'info': 'green',
            'warning': 'orange',
            'critical': 'red',
        }
        color = severity_colors.get(obj.severity, 'black')
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, obj.get_severity_display()
        )
    severity_display.short_description = "Severity"
