"""WSGI entry point for the Hotel Paradise API.

Production servers (gunicorn, uWSGI) import ``application`` from here and
are expected to set DJANGO_SETTINGS_MODULE to ``config.settings.prod``.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
