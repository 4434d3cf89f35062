"""
Portal Session Middleware
Restores the signed-in customer for every request and guards non-public URLs.
"""

import logging
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.utils.http import urlencode

from apps.common.logging import set_request_context

from .session import PortalSession

logger = logging.getLogger(__name__)


class PortalSessionMiddleware:
    """
    Attaches ``request.portal_session`` (a PortalSession) and ``request.customer``.

    Requests to non-public URLs without a session identity are redirected to the
    login page, preserving the requested path in ``next``.
    """

    # Public URLs that don't require a signed-in customer
    PUBLIC_URLS = [
        '/login/',
        '/logout/',
        '/register/',
        '/static/',
        '/status/',
        '/favicon.ico',
    ]

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        portal_session = PortalSession.restore(request.session)
        request.portal_session = portal_session
        request.customer = portal_session.customer
        if portal_session.is_authenticated:
            set_request_context(customer_id=portal_session.customer.id)

        if not portal_session.is_authenticated and not self.is_public_url(request.path):
            logger.debug(f"🔒 [Auth] No customer in session for {request.path}, redirecting to login")
            return self.redirect_to_login(request)

        return self.get_response(request)

    def is_public_url(self, path: str) -> bool:
        return any(path.startswith(public_url) for public_url in self.PUBLIC_URLS)

    def redirect_to_login(self, request: HttpRequest) -> HttpResponse:
        """Redirect to login preserving the originally requested URL."""
        login_url = '/login/'
        if request.path and request.path != '/':
            params = urlencode({'next': request.get_full_path()})
            login_url = f'{login_url}?{params}'
        return redirect(login_url)
