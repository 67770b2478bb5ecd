"""
WSGI config for the student report service.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'studentreport.settings')

application = get_wsgi_application()
