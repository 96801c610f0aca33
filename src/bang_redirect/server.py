"""Serve the bang redirect service with gunicorn.

Every worker process owns its own bang catalog and adopts versions synced
by its siblings on the next request, so the worker count is free to vary.
"""

import os
from typing import Any

import django
import gunicorn.app.base
from django.conf import settings
from django.core.handlers.wsgi import WSGIHandler
from django.core.management import call_command
from django.core.wsgi import get_wsgi_application


class BangServer(gunicorn.app.base.BaseApplication):
    """Gunicorn application serving the Django WSGI handler."""

    def __init__(self, options: dict[str, Any]) -> None:
        self.options = options
        super().__init__()

    def load_config(self) -> None:
        for key, value in self.options.items():
            self.cfg.set(key, value)

    def load(self) -> WSGIHandler:
        return get_wsgi_application()


def server_options() -> dict[str, Any]:
    """Gunicorn options from the SERVER_* settings."""
    return {
        "bind": settings.SERVER_BIND,
        "workers": settings.SERVER_WORKERS,
        "threads": settings.SERVER_THREADS,
        "worker_class": "gthread",
    }


def prepare() -> None:
    """Create the durable store table and load the bang dataset."""
    call_command("migrate", interactive=False, verbosity=0)
    call_command("sync_bangs")


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bang_redirect.settings")
    django.setup()
    prepare()
    BangServer(server_options()).run()
