# ===============================================================================
# PORTAL TEST CONFIGURATION - DATABASE ACCESS BLOCKER ⚠️
# ===============================================================================
# All data lives in the record store; tests must never reach a database or
# the network.

import os
from unittest.mock import patch

import django
import pytest
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, connections

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.test")
django.setup()


@pytest.fixture(autouse=True)
def block_database_access():
    """
    Automatically prevent all database access in portal tests.

    Sessions run on the cache backend in test settings, so any database access
    means a view or helper is bypassing the record store.
    """

    def blocked_ensure_connection():
        raise ImproperlyConfigured(
            "🚨 Portal test attempted database access! "
            "Portal data must come from the record store."
        )

    def blocked_cursor():
        raise ImproperlyConfigured(
            "🚨 Portal test attempted to create a database cursor!"
        )

    with patch.object(connections[DEFAULT_DB_ALIAS], 'ensure_connection', blocked_ensure_connection), \
         patch.object(connections[DEFAULT_DB_ALIAS], 'cursor', blocked_cursor):
        yield


@pytest.fixture(autouse=True)
def block_network_access():
    """Any un-mocked record store call fails loudly instead of hitting the network"""
    with patch('apps.api_client.services.requests.request') as mock_request:
        mock_request.side_effect = AssertionError("Un-mocked record store request in test")
        yield mock_request
