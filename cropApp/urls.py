from django.urls import path
from . import views

urlpatterns = [
    path('crops/recommended', views.get_recommended_crops, name='recommended-crops'),
    path('crops', views.get_all_crops, name='all-crops'),
]
