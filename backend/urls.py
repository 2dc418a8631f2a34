from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


urlpatterns = [
    path('admin/', admin.site.urls),

    # JWT login for farmers linked to a user account
    path('api/auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    path('api/', include('farmerApp.urls')),
    path('api/', include('weatherApp.urls')),
    path('api/', include('cropApp.urls')),
    path('api/', include('resourceApp.urls')),
    path('api/', include('advisoryApp.urls')),
    path('api/', include('chatApp.urls')),
    path('api/', include('soilApp.urls')),
    path('api/', include('pestApp.urls')),

    # Server-rendered pages
    path('', include('dashboardApp.urls')),
]
