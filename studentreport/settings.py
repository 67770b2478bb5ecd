"""
Django settings for the student report service.

Values are read from environment variables with development defaults.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-student-report-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,pdf-service').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'core',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
]

ROOT_URLCONF = 'studentreport.urls'

WSGI_APPLICATION = 'studentreport.wsgi.application'

# The service keeps no state
DATABASES = {}

USE_I18N = False
USE_TZ = True
TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Port used by `manage.py runreportserver`
PORT = int(os.environ.get('PORT', '8080'))

# Upstream student API that calls this service
BACKEND_URL = os.environ.get('BACKEND_URL', 'http://localhost:5007')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}
