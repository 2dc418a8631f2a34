from django.core.validators import MinValueValidator
from django.db import models
from farmerApp.models import Farmer

from .efficiency import classify_usage


class Resource(models.Model):
    RESOURCE_TYPES = [
        ('water', 'Water'),
        ('fertilizer', 'Fertilizer'),
        ('pesticide', 'Pesticide'),
    ]

    farmer = models.ForeignKey(Farmer, on_delete=models.CASCADE, null=True, blank=True, related_name='resources')
    resource_type = models.CharField(max_length=20, choices=RESOURCE_TYPES)
    used = models.FloatField(default=0, validators=[MinValueValidator(0)])
    optimal = models.FloatField(validators=[MinValueValidator(0)])
    unit = models.CharField(max_length=20)

    # Reporting period, month stored as its English name ("January")
    month = models.CharField(max_length=20)
    year = models.IntegerField()

    class Meta:
        ordering = ['id']

    @property
    def efficiency(self):
        return classify_usage(self.used, self.optimal)

    def __str__(self):
        return f"{self.resource_type}: {self.used}/{self.optimal} {self.unit} ({self.month} {self.year})"
