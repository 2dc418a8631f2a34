from django.urls import path
from . import views

urlpatterns = [
    path('advisories/recent', views.get_recent_advisories, name='recent-advisories'),
    path('advisories', views.get_all_advisories, name='all-advisories'),
]
