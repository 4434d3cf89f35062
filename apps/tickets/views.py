# ===============================================================================
# SUPPORT TICKETS VIEWS - PORTAL SERVICE 🎫
# ===============================================================================

import logging

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme, urlencode
from django.utils.translation import gettext as _
from django.views.decorators.http import require_http_methods, require_POST

from apps.api_client.services import RecordStoreError
from apps.common.decorators import require_admin, require_authentication
from apps.common.pagination import build_listing
from apps.customers.schemas import Customer
from apps.customers.services import CustomerAPIClient

from .filters import filter_tickets
from .forms import TicketCreateForm, TicketFilterForm, TicketStatusForm
from .schemas import TicketStatus
from .services import TicketAPIClient

logger = logging.getLogger(__name__)


def customer_display_name(customers_by_id: dict[str, Customer], customer_id: str) -> str:
    customer = customers_by_id.get(customer_id)
    if customer is None:
        return _("Customer %(id)s") % {'id': customer_id}
    return f"{customer.first_name} {customer.last_name}"


def _filter_query(search: str, status: str) -> str:
    """Query string that keeps the current filters on pagination links"""
    params = {}
    if search:
        params['search'] = search
    if status and status != 'all':
        params['status'] = status
    return urlencode(params)


def _safe_next(request: HttpRequest, fallback: str) -> str:
    raw_next = request.POST.get('next', '')
    if raw_next and url_has_allowed_host_and_scheme(raw_next, allowed_hosts={request.get_host()}):
        return raw_next
    return fallback


@require_authentication
def ticket_list(request: HttpRequest) -> HttpResponse:
    """
    Ticket list: administrators see every ticket, customers their own.
    Supports search, status filtering and pagination.
    """
    portal_session = request.portal_session
    customer = portal_session.customer
    filter_form = TicketFilterForm(request.GET)
    search, status = filter_form.filters()

    try:
        api = TicketAPIClient()
        tickets = api.list_all() if portal_session.is_admin else api.list_by_owner(customer.id)
        load_failed = False
    except RecordStoreError as e:
        logger.error(f"🔥 [Tickets View] Error loading tickets for customer {customer.id}: {e}")
        messages.error(request, _('Failed to load tickets'))
        tickets = []
        load_failed = True

    filtered = filter_tickets(tickets, search, status)
    listing = build_listing(filtered, request.GET.get('page', 1), settings.TICKETS_PAGE_SIZE)

    context = {
        'listing': listing,
        'page': listing.page,
        'total_count': len(tickets),
        'filter_form': filter_form,
        'search_query': search,
        'status_filter': status,
        'filter_query': _filter_query(search, status),
        'is_filtered': bool(search) or status != 'all',
        'error': load_failed,
    }

    logger.info(f"✅ [Tickets View] Showing {len(listing.page.items)} of {len(filtered)} tickets for customer {customer.id}")
    return render(request, 'tickets/ticket_list.html', context)


@require_authentication
@require_http_methods(["GET", "POST"])
def ticket_create(request: HttpRequest) -> HttpResponse:
    """Create a new support ticket for the signed-in customer."""
    customer = request.portal_session.customer

    if request.method == 'POST':
        form = TicketCreateForm(request.POST)
        if form.is_valid():
            try:
                ticket = TicketAPIClient().create({
                    'customer_id': customer.id,
                    'title': form.cleaned_data['title'],
                    'description': form.cleaned_data['description'],
                    'status': TicketStatus.OPEN,
                })
                logger.info(f"✅ [Tickets View] Created ticket {ticket.id} for customer {customer.id}")
                messages.success(request, _('Ticket created successfully'))
                return redirect('tickets:list')

            except RecordStoreError as e:
                logger.error(f"🔥 [Tickets View] Error creating ticket for customer {customer.id}: {e}")
                messages.error(request, _('Failed to create ticket'))
        else:
            messages.error(request, _('Please fill in all fields'))
    else:
        form = TicketCreateForm()

    return render(request, 'tickets/ticket_create.html', {'form': form})


@require_authentication
def ticket_detail(request: HttpRequest, ticket_id: str) -> HttpResponse:
    """Ticket detail: visible to its owner and to the administrator."""
    portal_session = request.portal_session
    customer = portal_session.customer

    try:
        ticket = TicketAPIClient().get_by_id(ticket_id)
    except RecordStoreError as e:
        logger.error(f"🔥 [Tickets View] Error loading ticket {ticket_id} for customer {customer.id}: {e}")
        messages.error(request, _('Ticket not found or access denied.'))
        return redirect('tickets:list')

    if not portal_session.is_admin and ticket.customer_id != customer.id:
        logger.warning(f"🚨 [Tickets View] Customer {customer.id} tried to open ticket {ticket_id}")
        messages.error(request, _('Ticket not found or access denied.'))
        return redirect('tickets:list')

    context = {
        'ticket': ticket,
        'status_form': TicketStatusForm(initial={'status': ticket.status}) if portal_session.is_admin else None,
    }
    return render(request, 'tickets/ticket_detail.html', context)


# ===============================================================================
# ADMINISTRATOR TICKET MANAGEMENT 🛡️
# ===============================================================================

@require_admin
def admin_ticket_list(request: HttpRequest) -> HttpResponse:
    """All tickets with customer names, filters and a fixed page size of 5."""
    filter_form = TicketFilterForm(request.GET)
    search, status = filter_form.filters()

    try:
        tickets = TicketAPIClient().list_all()
        customers = CustomerAPIClient().list_all()
        load_failed = False
    except RecordStoreError as e:
        logger.error(f"🔥 [Admin Tickets] Error fetching data: {e}")
        messages.error(request, _('Failed to load tickets data'))
        tickets, customers = [], []
        load_failed = True

    customers_by_id = {c.id: c for c in customers}
    filtered = filter_tickets(tickets, search, status)
    listing = build_listing(filtered, request.GET.get('page', 1), settings.ADMIN_TICKETS_PAGE_SIZE)

    rows = [
        {
            'ticket': ticket,
            'customer_name': customer_display_name(customers_by_id, ticket.customer_id),
            'status_form': TicketStatusForm(initial={'status': ticket.status}),
        }
        for ticket in listing.page.items
    ]

    context = {
        'listing': listing,
        'page': listing.page,
        'rows': rows,
        'total_count': len(tickets),
        'filter_form': filter_form,
        'search_query': search,
        'status_filter': status,
        'filter_query': _filter_query(search, status),
        'is_filtered': bool(search) or status != 'all',
        'error': load_failed,
    }
    return render(request, 'tickets/admin_ticket_list.html', context)


@require_admin
@require_POST
def ticket_update_status(request: HttpRequest, ticket_id: str) -> HttpResponse:
    """Administrator status transition; the list is re-fetched after redirect."""
    next_url = _safe_next(request, '/tickets/admin/')
    form = TicketStatusForm(request.POST)

    if not form.is_valid():
        messages.error(request, _('Failed to update ticket status'))
        return redirect(next_url)

    try:
        TicketAPIClient().update_status(ticket_id, form.cleaned_data['status'])
        messages.success(request, _('Ticket status updated successfully'))
    except RecordStoreError as e:
        logger.error(f"🔥 [Admin Tickets] Error updating ticket {ticket_id}: {e}")
        messages.error(request, _('Failed to update ticket status'))

    return redirect(next_url)


@require_admin
@require_POST
def ticket_delete(request: HttpRequest, ticket_id: str) -> HttpResponse:
    next_url = _safe_next(request, '/tickets/admin/')
    try:
        TicketAPIClient().delete(ticket_id)
        messages.success(request, _('Ticket deleted successfully'))
    except RecordStoreError as e:
        logger.error(f"🔥 [Admin Tickets] Error deleting ticket {ticket_id}: {e}")
        messages.error(request, _('Failed to delete ticket'))

    return redirect(next_url)
