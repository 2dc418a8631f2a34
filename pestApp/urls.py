from django.urls import path
from . import views

urlpatterns = [
    path('pests-diseases', views.get_pests_diseases, name='pests-diseases'),
]
