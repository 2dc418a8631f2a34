from django.urls import path
from . import views

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('crops/', views.crops_page, name='crops'),
    path('advisories/', views.advisories_page, name='advisories'),
    path('pests/', views.pests_page, name='pests'),
    path('chat/', views.chat_page, name='chat'),
    path('soil/', views.soil_page, name='soil'),
    path('language/', views.toggle_language, name='toggle-language'),
]
