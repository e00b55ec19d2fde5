"""
Django settings for bazaarBackend project.

Configuration is read from the environment (a local ``.env`` file is loaded
first). Products, chats and hashtags live in MongoDB; the relational database
only backs Django's own contrib tables.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.environ.get("SECRET_KEY", "")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY environment variable is required")

DEBUG = os.environ.get("DEBUG", "False").lower() == "true"

ALLOWED_HOSTS = [host.strip() for host in os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "marketplace.apps.MarketplaceConfig",
    "chat.apps.ChatConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "bazaarBackend.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": ["django.template.context_processors.request"]},
    },
]

WSGI_APPLICATION = "bazaarBackend.wsgi.application"
ASGI_APPLICATION = "bazaarBackend.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Authentication is handled upstream; these endpoints are open to the gateway.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Bazaar API",
    "DESCRIPTION": "Marketplace product listings, product discovery and buyer/seller chat",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# ===== Infrastructure =====

INFRASTRUCTURE = {
    "MONGO_URI": os.environ.get("MONGO_URI", "mongodb://localhost:27017"),
    "MONGO_DB_NAME": os.environ.get("MONGO_DB_NAME", "bazaar"),
    "MONGO_SERVER_SELECTION_TIMEOUT_MS": int(os.environ.get("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")),
    "STORAGE_BACKEND": os.environ.get("STORAGE_BACKEND", "local"),
    "PRODUCT_IMAGE_DIR": os.environ.get("PRODUCT_IMAGE_DIR", str(BASE_DIR / "images" / "product")),
}

MARKETPLACE = {
    "DEFAULT_PAGE_LIMIT": int(os.environ.get("MARKETPLACE_DEFAULT_PAGE_LIMIT", "25")),
    "MAX_PAGE_LIMIT": int(os.environ.get("MARKETPLACE_MAX_PAGE_LIMIT", "100")),
    # $geoNear radius in metres
    "GEO_MAX_DISTANCE_METERS": int(os.environ.get("MARKETPLACE_GEO_MAX_DISTANCE_METERS", "1000000")),
    "SEARCH_RESULT_LIMIT": int(os.environ.get("MARKETPLACE_SEARCH_RESULT_LIMIT", "5")),
    "AUTOCOMPLETE_INDEX": os.environ.get("MARKETPLACE_AUTOCOMPLETE_INDEX", "searchProducts"),
    "TEXT_SEARCH_INDEX": os.environ.get("MARKETPLACE_TEXT_SEARCH_INDEX", "searchProductsTxt"),
}

TRACING = {
    "ENABLED": os.environ.get("TRACING_ENABLED", "False").lower() == "true",
    "SERVICE_NAME": os.environ.get("TRACING_SERVICE_NAME", "bazaar-backend"),
}

# ===== Logging =====

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} [{levelname}] {name}: {message}",
            "style": "{",
        },
        "simple": {
            "format": "[{levelname}] {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "pymongo": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "marketplace": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "chat": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "infrastructure": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
