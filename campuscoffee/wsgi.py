"""WSGI entrypoint for the CampusCoffee POS service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "campuscoffee.settings")

application = get_wsgi_application()
