import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


def generate_farmer_id():
    return str(uuid.uuid4())


class Farmer(models.Model):
    LANGUAGE_CHOICES = [
        ('en', 'English'),
        ('hi', 'Hindi'),
    ]

    id = models.CharField(max_length=64, primary_key=True, default=generate_farmer_id, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='farmer',
    )
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    language = models.CharField(max_length=5, choices=LANGUAGE_CHOICES, default='en')
    phone_number = models.CharField(max_length=20, null=True, blank=True)
    farm_size = models.FloatField(null=True, blank=True, help_text="Farm size in acres")
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"{self.name} ({self.location})"
