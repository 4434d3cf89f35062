"""
Access Control Decorators for the Helpdesk Portal
Administrator checks are UI-level only: the record store itself enforces nothing.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.utils.translation import gettext as _

logger = logging.getLogger(__name__)

ACCESS_DENIED_STATUS_CODE = 403


def require_authentication(view_func: Callable) -> Callable:
    """🔒 Require a signed-in customer"""
    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        portal_session = getattr(request, 'portal_session', None)
        if portal_session is None or not portal_session.is_authenticated:
            if request.headers.get('Accept') == 'application/json':
                return JsonResponse({'error': _('Authentication required')}, status=401)
            return redirect('/login/')

        return view_func(request, *args, **kwargs)
    return wrapper


def require_admin(view_func: Callable) -> Callable:
    """🔒 Require the administrator identity; others get an access-denied page"""
    @wraps(view_func)
    @require_authentication
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        if not request.portal_session.is_admin:
            logger.warning(
                f"🚨 [Security] Customer {request.portal_session.customer.id} "
                f"denied administrator page {request.path}"
            )
            if request.headers.get('Accept') == 'application/json':
                return JsonResponse({'error': _('Access denied')}, status=ACCESS_DENIED_STATUS_CODE)
            return render(request, 'common/access_denied.html', status=ACCESS_DENIED_STATUS_CODE)

        return view_func(request, *args, **kwargs)
    return wrapper
