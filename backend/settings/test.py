"""
Test settings for the StockKap dashboard API (pytest-django).
"""

from .base import *

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ALLOWED_HOSTS = ['*']

# Faster password hashing in tests
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

CRON_SECRET = 'test-cron-secret'
LOG_TO_FILES = False

LOGGING['root']['level'] = 'WARNING'
LOGGING['loggers']['dashboard_api']['level'] = 'WARNING'

REST_FRAMEWORK['TEST_REQUEST_DEFAULT_FORMAT'] = 'json'
