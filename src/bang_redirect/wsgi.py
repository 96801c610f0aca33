"""WSGI config for the bang_redirect project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bang_redirect.settings")

application = get_wsgi_application()
