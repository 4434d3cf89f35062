"""
API Client app configuration for the Helpdesk Portal
"""

from django.apps import AppConfig


class ApiClientConfig(AppConfig):
    """Configuration for the record store client"""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.api_client"
    verbose_name = "Record Store Client"
