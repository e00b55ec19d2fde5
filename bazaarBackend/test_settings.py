import os

# Mock SECRET_KEY for tests BEFORE importing settings to bypass validation
os.environ.setdefault("SECRET_KEY", "django-insecure-test-key-for-unit-tests-only")

from .settings import *  # noqa: F403

# Override Database to use in-memory SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Tests never touch a real MongoDB server; collections are mocked or mongomock-backed
INFRASTRUCTURE["MONGO_URI"] = "mongodb://localhost:27017"  # noqa: F405
INFRASTRUCTURE["MONGO_DB_NAME"] = "bazaar_test"  # noqa: F405
INFRASTRUCTURE["STORAGE_BACKEND"] = "local"  # noqa: F405

TRACING["ENABLED"] = False  # noqa: F405

LOGGING["root"]["level"] = "WARNING"  # noqa: F405
