from django.urls import path
from . import views

urlpatterns = [
    path('health', views.health_check, name='health'),
    path('api/v1/generate-pdf', views.generate_pdf, name='generate-pdf'),
]
