from django.urls import path
from . import views

urlpatterns = [
    path('soil/analyze', views.analyze_soil_sample, name='analyze-soil'),
]
