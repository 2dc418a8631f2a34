from django.urls import path
from . import views

urlpatterns = [
    path('resources/current', views.get_current_resources, name='current-resources'),
]
