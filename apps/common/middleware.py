"""
Common middleware for the Helpdesk Portal
"""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from .logging import clear_request_context, set_request_context

REQUEST_ID_HEADER = "X-Request-ID"
SERVICE_HEADER = "X-Service"
SERVICE_NAME = "portal"


class RequestIDMiddleware:
    """Add unique request ID for tracing; log records pick it up via RequestIDFilter"""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = str(uuid.uuid4())
        request.META["REQUEST_ID"] = request_id
        set_request_context(request_id=request_id)

        try:
            response = self.get_response(request)
        finally:
            clear_request_context()

        # Add to response headers for debugging
        response[REQUEST_ID_HEADER] = request_id
        return response


class ServiceHeaderMiddleware:
    """Stamp responses with the serving service; Django's SecurityMiddleware and
    XFrameOptionsMiddleware set the security headers."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        response[SERVICE_HEADER] = SERVICE_NAME
        return response
