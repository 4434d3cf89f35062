"""
Development settings for the Helpdesk Portal
"""

import copy
import os

from .base import *  # noqa: F403

# Debug mode
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ["*"]

# 🔒 Development-only fallback; prod refuses to start without SECRET_KEY
SECRET_KEY = os.environ.get("SECRET_KEY", "dev-insecure-portal-key-change-in-production")

SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Development logging
LOGGING = copy.deepcopy(LOGGING)  # noqa: F405
LOGGING["root"]["level"] = "DEBUG"  # noqa: F405
LOGGING["loggers"]["apps"]["level"] = "DEBUG"  # noqa: F405
