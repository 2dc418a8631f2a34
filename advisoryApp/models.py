from django.db import models
from django.utils import timezone
from farmerApp.models import Farmer


class Advisory(models.Model):
    SEVERITY_CHOICES = [
        ('info', 'Info'),
        ('warning', 'Warning'),
        ('critical', 'Critical'),
    ]

    # Advisories without a farmer are broadcast to everyone
    farmer = models.ForeignKey(Farmer, on_delete=models.CASCADE, null=True, blank=True, related_name='advisories')
    title = models.CharField(max_length=255)
    content = models.TextField()
    category = models.CharField(max_length=50)
    severity = models.CharField(max_length=10, choices=SEVERITY_CHOICES, default='info')
    timestamp = models.DateTimeField(default=timezone.now)
    source = models.CharField(max_length=255, null=True, blank=True)

    class Meta:
        ordering = ['-timestamp', '-id']
        verbose_name_plural = 'advisories'

    def __str__(self):
        return f"[{self.severity}] {self.title}"
