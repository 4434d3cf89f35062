"""
Context processors for the Helpdesk Portal
"""

from typing import Any

from django.http import HttpRequest


def portal_context(request: HttpRequest) -> dict[str, Any]:
    """
    Add the signed-in customer and administrator flag to templates.
    Stateless portal - no request.user available.
    """
    portal_session = getattr(request, "portal_session", None)
    if portal_session is None or not portal_session.is_authenticated:
        return {
            "user_is_authenticated": False,
            "current_customer": None,
            "is_admin": False,
        }

    return {
        "user_is_authenticated": True,
        "current_customer": portal_session.customer,
        "user_full_name": portal_session.customer.full_name,
        "is_admin": portal_session.is_admin,
    }
