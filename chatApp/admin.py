from django.contrib import admin
from .models import ChatMessage


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ['id', 'farmer', 'role', 'short_content', 'language', 'timestamp']
    list_filter = ['role', 'language', 'timestamp']
    search_fields = ['content', 'farmer__name']

    def short_content(self, obj):
        return obj.content[:80]
    short_content.short_description = "Content"
