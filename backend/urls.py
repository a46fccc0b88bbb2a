"""
URL configuration for the StockKap dashboard API.
"""

from django.contrib import admin
from django.urls import path, include

from dashboard_api.views.health import health_check


urlpatterns = [
    # Health check (no auth required)
    path('health', health_check, name='health'),

    # Admin
    path('admin/', admin.site.urls),

    # Authentication
    path('auth/', include('dashboard_api.urls.auth')),

    # API endpoints
    path('api/', include('dashboard_api.urls.api')),
]
