from django.urls import path
from . import views

urlpatterns = [
    path('weather/current', views.get_current_weather, name='current-weather'),
]
