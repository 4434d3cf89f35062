"""
Portal Users App Configuration
Handles customer sign-in/sign-out against the record store.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.users"
    verbose_name = "Portal Users"
