from django.db import models


class Crop(models.Model):
    """Static reference data for crops suggested to farmers."""
    name = models.CharField(max_length=100)
    season = models.CharField(max_length=100)
    soil_type = models.CharField(max_length=50)
    water_requirement = models.CharField(max_length=50)

    # Estimates per acre
    expected_yield = models.FloatField(null=True, blank=True, help_text="Expected yield in kg")
    profit_estimate = models.FloatField(null=True, blank=True, help_text="Estimated profit in INR")
    growth_duration = models.IntegerField(null=True, blank=True, help_text="Growth duration in days")
    description = models.TextField(null=True, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.season})"
