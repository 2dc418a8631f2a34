from django.db import models
from django.utils import timezone
from farmerApp.models import Farmer


class ChatMessage(models.Model):
    ROLE_USER = 'user'
    ROLE_ASSISTANT = 'assistant'
    ROLE_CHOICES = [
        (ROLE_USER, 'User'),
        (ROLE_ASSISTANT, 'Assistant'),
    ]

    farmer = models.ForeignKey(Farmer, on_delete=models.CASCADE, null=True, blank=True, related_name='chat_messages')
    role = models.CharField(max_length=10, choices=ROLE_CHOICES)
    content = models.TextField()
    language = models.CharField(max_length=5, default='en')
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        # Insertion order; id breaks ties between messages saved in the same instant
        ordering = ['timestamp', 'id']

    def __str__(self):
        return f"{self.role}: {self.content[:50]}"
