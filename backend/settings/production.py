"""
Production settings for the StockKap dashboard API.
"""

import os
import warnings
from .base import *

DEBUG = False

# Secret key - required at runtime, but allow build-time with dummy value
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'build-time-dummy-key-replace-at-runtime')

if SECRET_KEY == 'build-time-dummy-key-replace-at-runtime':
    warnings.warn("DJANGO_SECRET_KEY not set - using dummy key (not safe for production)")

if not CRON_SECRET:
    warnings.warn("CRON_SECRET not set - the daily snapshot endpoint will reject every request")

# Every host is accepted when ALLOWED_HOSTS is unset
ALLOWED_HOSTS = env_list('ALLOWED_HOSTS', '') or ['*']


# Database - PostgreSQL
# Supports both Unix socket and TCP connections
DB_SOCKET_DIR = os.environ.get('DB_SOCKET_DIR', '')
DB_HOST = os.environ.get('DB_HOST', '')

if DB_SOCKET_DIR or DB_HOST:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DB_NAME', 'stockkap'),
            'USER': os.environ.get('DB_USER', 'stockkap'),
            'PASSWORD': os.environ.get('DB_PASSWORD', ''),
            'HOST': DB_SOCKET_DIR or DB_HOST,
            'PORT': '' if DB_SOCKET_DIR else os.environ.get('DB_PORT', '5432'),
        }
    }
else:
    # Build-time fallback - use SQLite (for collectstatic during image build)
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
        }
    }


# CORS - Production origins
FRONTEND_URL = os.environ.get('FRONTEND_URL', '')
CORS_ALLOWED_ORIGINS = env_list('CORS_ALLOWED_ORIGINS', FRONTEND_URL)
CORS_ALLOW_ALL_ORIGINS = False


# Security settings for production
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# CSRF trusted origins
CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)


# Logging for production
LOGGING['root']['level'] = 'INFO'
LOGGING['loggers']['django']['level'] = 'WARNING'
LOGGING['loggers']['dashboard_api']['level'] = 'INFO'
