"""
WSGI config for the StockKap dashboard API.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backend.settings.development')

application = get_wsgi_application()
