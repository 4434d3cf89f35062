"""
Django settings for the Helpdesk Portal - support tickets over a hosted record store.
"""

import os
from pathlib import Path
from typing import Any

# ===============================================================================
# CORE DJANGO SETTINGS
# ===============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DJANGO_APPS: list[str] = [
    "django.contrib.sessions",  # Signed-in customer lives in the session
    "django.contrib.messages",  # Message framework for user feedback
    "django.contrib.staticfiles",  # Static file serving
]

LOCAL_APPS: list[str] = [
    "apps.common",  # Shared utilities, pagination, logging
    "apps.api_client",  # Record store HTTP client
    "apps.users",  # Sign-in/sign-out and registration
    "apps.customers",  # Customer records (administrator views)
    "apps.tickets",  # Support tickets
    "apps.dashboard",  # Ticket statistics
]

INSTALLED_APPS: list[str] = DJANGO_APPS + LOCAL_APPS

MIDDLEWARE: list[str] = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",  # CSRF protection
    "django.contrib.messages.middleware.MessageMiddleware",  # Messages support
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware last
    "apps.common.middleware.RequestIDMiddleware",
    "apps.common.middleware.ServiceHeaderMiddleware",
    "apps.users.middleware.PortalSessionMiddleware",  # Restores the signed-in customer
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [
            BASE_DIR / "templates",
        ],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",  # Messages in templates
                "apps.common.context_processors.portal_context",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

# ===============================================================================
# DATABASE - SESSIONS ONLY
# ===============================================================================

# All business data lives in the record store; the database only holds sessions
DATABASES: dict[str, dict[str, Any]] = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(BASE_DIR / "portal.sqlite3"),
        "OPTIONS": {
            "timeout": 20,
        },
    }
}

# DB-backed sessions survive server restarts
SESSION_ENGINE = "django.contrib.sessions.backends.db"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "portal-cache",
    }
}

# ===============================================================================
# RECORD STORE CONFIGURATION
# ===============================================================================

# Hosted REST record store with "Customers" and "Tickets" collections
RECORD_STORE_BASE_URL = os.environ.get(
    "RECORD_STORE_BASE_URL",
    "https://68935be7c49d24bce86a8259.mockapi.io",
)
RECORD_STORE_TIMEOUT = int(os.environ.get("RECORD_STORE_TIMEOUT", "30"))

# ===============================================================================
# LIST PAGINATION
# ===============================================================================

TICKETS_PAGE_SIZE = int(os.environ.get("TICKETS_PAGE_SIZE", "10"))
ADMIN_TICKETS_PAGE_SIZE = int(os.environ.get("ADMIN_TICKETS_PAGE_SIZE", "5"))
CUSTOMERS_PAGE_SIZE = int(os.environ.get("CUSTOMERS_PAGE_SIZE", "10"))

# ===============================================================================
# INTERNATIONALIZATION
# ===============================================================================

LANGUAGE_CODE = "en"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ===============================================================================
# STATIC FILES
# ===============================================================================

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# ===============================================================================
# SECURITY SETTINGS
# ===============================================================================

# 🔒 SECURITY: No fallback secrets in base config - must be set in environment
SECRET_KEY = os.environ.get("SECRET_KEY")

DEBUG = os.environ.get("DEBUG", "True").lower() == "true"

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

# ===============================================================================
# SESSION CONFIGURATION 🔐
# ===============================================================================

SESSION_COOKIE_AGE = 24 * 60 * 60  # 24 hours
SESSION_EXPIRE_AT_BROWSER_CLOSE = False
SESSION_SAVE_EVERY_REQUEST = False  # Only save when modified
SESSION_COOKIE_NAME = "portal_session"

SESSION_COOKIE_SECURE = not DEBUG  # HTTPS in production
SESSION_COOKIE_HTTPONLY = True  # Prevent XSS access
SESSION_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_SECURE = not DEBUG
CSRF_COOKIE_SAMESITE = "Lax"

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"
X_FRAME_OPTIONS = "DENY"

# ===============================================================================
# LOGGING CONFIGURATION
# ===============================================================================

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "unified": {
            "()": "colorlog.ColoredFormatter",
            "format": "{asctime} {log_color}{levelname:<8}{reset} {service_name} {name:<40} {message} [{request_id}]",
            "datefmt": "%Y-%m-%d %H:%M:%S",
            "style": "{",
            "log_colors": {
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        },
        "json": {
            "()": "apps.common.logging.PortalJSONFormatter",
        },
    },
    "filters": {
        "add_request_id": {
            "()": "apps.common.logging.RequestIDFilter",
        },
        "add_service_name": {
            "()": "apps.common.logging.ServiceNameFilter",
            "service_name": "PORT",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "unified",
            "filters": ["add_request_id", "add_service_name"],
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "django.server": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "apps": {
            "handlers": ["console"],
            "level": "DEBUG" if DEBUG else "INFO",
            "propagate": False,
        },
    },
}

# ===============================================================================
# DEFAULT PRIMARY KEY FIELD TYPE
# ===============================================================================

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
