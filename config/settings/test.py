"""
Test settings for the Helpdesk Portal
Fast, isolated testing environment: no database, no network.
"""

import copy

from .base import *  # noqa: F403

DEBUG = False

SECRET_KEY = "test-secret-key-not-for-production"  # noqa: S105

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

# Sessions in the local memory cache so tests never touch a database
SESSION_ENGINE = "django.contrib.sessions.backends.cache"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "test-cache",
    }
}

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Never reach the hosted store from tests
RECORD_STORE_BASE_URL = "https://record-store.test"
RECORD_STORE_TIMEOUT = 5

SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Quiet logging during tests
LOGGING = copy.deepcopy(LOGGING)  # noqa: F405
LOGGING["root"]["level"] = "CRITICAL"  # noqa: F405
LOGGING["loggers"]["apps"]["level"] = "CRITICAL"  # noqa: F405
LOGGING["loggers"]["django"]["level"] = "CRITICAL"  # noqa: F405
