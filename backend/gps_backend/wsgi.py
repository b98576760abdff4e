"""
WSGI config for the GPS route simulator.
Each request runs on its own worker thread, the outbound Directions call only blocks that thread.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'gps_backend.settings')

application = get_wsgi_application()
