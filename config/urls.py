"""URL configuration for the Hotel Paradise project.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/v1/rooms/', include('apps.rooms.urls')),
    path('api/v1/reservations/', include('apps.reservations.urls')),
    path('api/v1/events/', include('apps.events.urls')),
    # Public (no authentication)
    path('api/v1/public/', include('apps.rooms.public_urls')),
    path('api/v1/public/', include('apps.events.public_urls')),
    # API schema
    path('api/v1/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/v1/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
]
