# ===============================================================================
# CUSTOMERS VIEWS - ADMINISTRATOR MANAGEMENT 👥
# ===============================================================================

import logging

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils.http import urlencode
from django.utils.translation import gettext as _
from django.views.decorators.http import require_http_methods, require_POST

from apps.api_client.services import RecordStoreError, ValidationError
from apps.common.decorators import require_admin
from apps.common.pagination import build_listing

from .filters import filter_customers
from .forms import CustomerForm
from .services import CustomerAPIClient

logger = logging.getLogger(__name__)


@require_admin
def customer_list(request: HttpRequest) -> HttpResponse:
    """All customers, searchable by name, email and phone."""
    search = request.GET.get('search', '')

    try:
        customers = CustomerAPIClient().list_all()
        load_failed = False
    except RecordStoreError as e:
        logger.error(f"🔥 [Customers View] Error fetching customers: {e}")
        messages.error(request, _('Failed to load customers'))
        customers = []
        load_failed = True

    filtered = filter_customers(customers, search)
    listing = build_listing(filtered, request.GET.get('page', 1), settings.CUSTOMERS_PAGE_SIZE)

    context = {
        'listing': listing,
        'page': listing.page,
        'total_count': len(customers),
        'search_query': search,
        'filter_query': urlencode({'search': search}) if search else '',
        'error': load_failed,
    }
    return render(request, 'customers/customer_list.html', context)


@require_admin
@require_http_methods(["GET", "POST"])
def customer_create(request: HttpRequest) -> HttpResponse:
    if request.method == 'POST':
        form = CustomerForm(request.POST)
        if form.is_valid():
            try:
                customer = CustomerAPIClient().create(form.cleaned_data)
                messages.success(request, _('Customer %(name)s created successfully') % {'name': customer.full_name})
                return redirect('customers:list')

            except ValidationError as e:
                logger.warning(f"⚠️ [Customers View] Customer rejected by record store: {e}")
                form.add_error('email', _("Email already exists. Please use a different email."))

            except RecordStoreError as e:
                logger.error(f"🔥 [Customers View] Error creating customer: {e}")
                messages.error(request, _('Failed to create customer'))
    else:
        form = CustomerForm()

    context = {
        'form': form,
        'page_title': _('Add Customer'),
        'is_edit': False,
    }
    return render(request, 'customers/customer_form.html', context)


@require_admin
@require_http_methods(["GET", "POST"])
def customer_edit(request: HttpRequest, customer_id: str) -> HttpResponse:
    """
    Edit a customer record. When the administrator edits their own record the
    stored session identity is rewritten too.
    """
    api = CustomerAPIClient()

    try:
        customer = api.get_by_id(customer_id)
    except RecordStoreError as e:
        logger.error(f"🔥 [Customers View] Error loading customer {customer_id}: {e}")
        messages.error(request, _('Customer not found'))
        return redirect('customers:list')

    if request.method == 'POST':
        form = CustomerForm(request.POST)
        if form.is_valid():
            try:
                updated = api.update(customer_id, form.cleaned_data)
                request.portal_session.refresh(updated)
                messages.success(request, _('Customer %(name)s updated successfully') % {'name': updated.full_name})
                return redirect('customers:list')

            except RecordStoreError as e:
                logger.error(f"🔥 [Customers View] Error updating customer {customer_id}: {e}")
                messages.error(request, _('Failed to update customer'))
    else:
        form = CustomerForm(initial=CustomerForm.initial_from(customer))

    context = {
        'form': form,
        'customer': customer,
        'page_title': _('Edit Customer'),
        'is_edit': True,
    }
    return render(request, 'customers/customer_form.html', context)


@require_admin
@require_POST
def customer_delete(request: HttpRequest, customer_id: str) -> HttpResponse:
    if customer_id == request.portal_session.customer.id:
        # Deleting the signed-in administrator would orphan the session
        messages.error(request, _('You cannot delete your own account'))
        return redirect('customers:list')

    try:
        CustomerAPIClient().delete(customer_id)
        messages.success(request, _('Customer deleted successfully'))
    except RecordStoreError as e:
        logger.error(f"🔥 [Customers View] Error deleting customer {customer_id}: {e}")
        messages.error(request, _('Failed to delete customer'))

    return redirect('customers:list')
