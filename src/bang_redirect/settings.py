"""Django settings for the bang_redirect project."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("SECRET_KEY")
if not SECRET_KEY:
    msg = "SECRET_KEY environment variable is required"
    raise ValueError(msg)

DEBUG = os.environ.get("DEBUG", "False") in ("True", "true", "1")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]
INSTALLED_APPS = [
    "bangs",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "bang_redirect.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "bang_redirect.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    },
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Bang engine
# Dataset document location: http(s) URL or local JSON file. Empty means the
# dataset bundled with the bangs app.
BANGS_DATASET_URL = os.environ.get("BANGS_DATASET_URL", "")
# Search URL used when no bang matches, {{{s}}} marks the query.
BANGS_FALLBACK_URL = os.environ.get(
    "BANGS_FALLBACK_URL",
    "https://duckduckgo.com/?q={{{s}}}",
)
BANGS_SUGGESTION_LIMIT = int(os.environ.get("BANGS_SUGGESTION_LIMIT", "5"))

# Gunicorn
SERVER_BIND = os.environ.get("BIND", "0.0.0.0:8000")
SERVER_WORKERS = int(os.environ.get("WORKERS", "1"))
SERVER_THREADS = int(os.environ.get("THREADS", "8"))
