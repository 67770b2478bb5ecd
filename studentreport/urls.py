"""
URL configuration for the student report service.
"""
from django.urls import include, path

urlpatterns = [
    path('', include('core.urls')),
]
