from django.urls import path
from . import views

urlpatterns = [
    path('farmers/me', views.get_current_farmer, name='current-farmer'),
]
