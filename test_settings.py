from studentreport.settings import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ALLOWED_HOSTS = ['testserver', 'localhost']

LOG_LEVEL = 'WARNING'
LOGGING['root']['level'] = LOG_LEVEL
