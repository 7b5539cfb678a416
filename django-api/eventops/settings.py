"""Django settings for the admin event operations service.

All state is held in process memory, so no database is configured.
Values come from environment variables with development defaults.
"""

import os


def env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SERVICE_NAME = "admin-event-ops-service"

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-insecure-secret-key")
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")
PORT = int(os.environ.get("PORT", "3007"))

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "events",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "eventops.urls"
WSGI_APPLICATION = "eventops.wsgi.application"

DATABASES = {}

APPEND_SLASH = False
USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "events.handlers.errors.domain_exception_handler",
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}

EVENT_OPS = {
    # Legacy behavior: sales keep counting past capacity.
    "ALLOW_OVERSELL": env_bool("EVENT_OPS_ALLOW_OVERSELL", True),
    "ENFORCE_STATUS_TRANSITIONS": env_bool("EVENT_OPS_ENFORCE_STATUS_TRANSITIONS", False),
    "REPORTS_REQUIRE_EVENT": env_bool("EVENT_OPS_REPORTS_REQUIRE_EVENT", False),
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django.request": {"level": "ERROR"},
    },
}
