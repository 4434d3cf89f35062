"""
Portal Users Views
Customer sign-in/sign-out and self-registration against the record store.
"""

import logging

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render, resolve_url
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext as _
from django.views.decorators.cache import never_cache
from django.views.decorators.csrf import csrf_protect
from django.views.decorators.http import require_http_methods

from apps.api_client.services import RecordStoreError, ValidationError
from apps.customers.services import CustomerAPIClient
from apps.users.forms import CustomerLoginForm, CustomerRegistrationForm

logger = logging.getLogger(__name__)


def _get_safe_redirect_target(request: HttpRequest, fallback: str = "/dashboard/") -> str:
    """
    Validate and return a safe redirect target.
    Accepts only same-host URLs with the expected scheme, otherwise the fallback.
    """
    raw_next = request.GET.get("next") or request.POST.get("next") or ""
    fallback_url = resolve_url(fallback)

    if not raw_next:
        return fallback_url

    if url_has_allowed_host_and_scheme(
        raw_next,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure()
    ):
        return raw_next

    logger.warning(f"⚠️ [Portal Auth] Unsafe redirect target blocked: {raw_next}")
    return fallback_url


@never_cache
@csrf_protect
@require_http_methods(["GET", "POST"])
def login_view(request: HttpRequest) -> HttpResponse:
    """
    Portal sign-in view.
    Looks the customer up by email in the record store and keeps it in the session.
    """
    portal_session = request.portal_session

    if portal_session.is_authenticated:
        return redirect(_get_safe_redirect_target(request))

    if request.method == 'GET':
        form = CustomerLoginForm()
    else:  # POST
        form = CustomerLoginForm(request.POST)

        if form.is_valid():
            email = form.cleaned_data['email']
            password = form.cleaned_data['password']

            try:
                if portal_session.sign_in(email, password):
                    customer = portal_session.customer
                    logger.info(f"✅ [Portal Auth] Customer {email} signed in")
                    messages.success(request, _("Welcome back, %(name)s!") % {'name': customer.first_name or customer.email})
                    return redirect(_get_safe_redirect_target(request))

                logger.warning(f"⚠️ [Portal Auth] Invalid credentials for {email}")
                messages.error(request, _("Invalid email or password. Please try again."))

            except RecordStoreError as e:
                logger.error(f"🔥 [Portal Auth] Record store error during login: {e}")
                messages.error(request, _("Login failed. Please try again."))

    context = {
        'form': form,
        'page_title': _('Sign In'),
        'next': request.GET.get('next', ''),
    }
    return render(request, 'users/login.html', context)


@never_cache
@require_http_methods(["GET", "POST"])
def logout_view(request: HttpRequest) -> HttpResponse:
    """Sign out clears the stored identity (POST only; GET just redirects)."""
    if request.method == 'POST':
        request.portal_session.sign_out()
        messages.success(request, _("You have been logged out successfully."))
    return redirect('/login/')


@never_cache
@csrf_protect
@require_http_methods(["GET", "POST"])
def register_view(request: HttpRequest) -> HttpResponse:
    """Customer self-registration: creates a Customer record in the store."""
    if request.portal_session.is_authenticated:
        return redirect('/dashboard/')

    if request.method == 'GET':
        form = CustomerRegistrationForm()
    else:  # POST
        form = CustomerRegistrationForm(request.POST)

        if form.is_valid():
            try:
                customer = CustomerAPIClient().create(form.cleaned_data)
                logger.info(f"✅ [Portal Auth] Registered customer {customer.id}")
                messages.success(request, _("Account created successfully! You can now log in with your email."))
                return redirect('users:login')

            except ValidationError as e:
                logger.warning(f"⚠️ [Portal Auth] Registration rejected by record store: {e}")
                form.add_error('email', _("Email already exists. Please use a different email."))

            except RecordStoreError as e:
                logger.error(f"🔥 [Portal Auth] Record store error during registration: {e}")
                messages.error(request, _("Registration failed. Please try again."))

    context = {
        'form': form,
        'page_title': _('Create Account'),
    }
    return render(request, 'users/register.html', context)
