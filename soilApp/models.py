from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from farmerApp.models import Farmer


class SoilAnalysis(models.Model):
    farmer = models.ForeignKey(Farmer, on_delete=models.CASCADE, null=True, blank=True, related_name='soil_analyses')
    soil_type = models.CharField(max_length=50)

    # Nutrient levels on a 0-100 scale
    nitrogen = models.FloatField(null=True, blank=True, validators=[MinValueValidator(0), MaxValueValidator(100)])
    phosphorus = models.FloatField(null=True, blank=True, validators=[MinValueValidator(0), MaxValueValidator(100)])
    potassium = models.FloatField(null=True, blank=True, validators=[MinValueValidator(0), MaxValueValidator(100)])
    ph = models.FloatField(null=True, blank=True, validators=[MinValueValidator(0), MaxValueValidator(14)])
    organic_matter = models.FloatField(null=True, blank=True, help_text="Organic matter (%)")

    # Text generated by the AI assistant
    recommendations = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name_plural = 'soil analyses'

    def __str__(self):
        return f"{self.soil_type} soil analysis ({self.created_at:%Y-%m-%d})"
