from django.db import models


class PestDisease(models.Model):
    TYPE_CHOICES = [
        ('pest', 'Pest'),
        ('disease', 'Disease'),
    ]
    SEVERITY_CHOICES = [
        ('low', 'Low'),
        ('medium', 'Medium'),
        ('high', 'High'),
    ]

    name = models.CharField(max_length=100)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    crop_affected = models.CharField(max_length=100)
    symptoms = models.JSONField(default=list)
    severity = models.CharField(max_length=10, choices=SEVERITY_CHOICES)
    treatment = models.TextField()
    prevention = models.TextField(null=True, blank=True)
    image_url = models.URLField(max_length=500, null=True, blank=True)

    class Meta:
        ordering = ['id']
        verbose_name = 'pest or disease'
        verbose_name_plural = 'pests and diseases'

    def __str__(self):
        return f"{self.name} ({self.get_type_display()} on {self.crop_affected})"
