"""
Dashboard views for the Helpdesk Portal
Ticket statistics and recent activity, loaded fresh from the record store.
"""

import logging

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.utils.translation import gettext as _

from apps.api_client.services import RecordStoreError
from apps.common.decorators import require_authentication
from apps.customers.services import CustomerAPIClient
from apps.tickets.filters import TicketSummary, summarize_tickets
from apps.tickets.services import TicketAPIClient

logger = logging.getLogger(__name__)


@require_authentication
def dashboard_view(request: HttpRequest) -> HttpResponse:
    """
    Administrators see statistics over every ticket plus the customer count;
    customers see statistics over their own tickets.
    """
    portal_session = request.portal_session
    customer = portal_session.customer

    stats = {**TicketSummary().as_stats(), 'total_customers': 0}
    context = {
        'stats': stats,
        'recent_tickets': [],
        'store_available': True,
    }

    try:
        ticket_api = TicketAPIClient()
        if portal_session.is_admin:
            tickets = ticket_api.list_all()
            stats['total_customers'] = len(CustomerAPIClient().list_all())
        else:
            tickets = ticket_api.list_by_owner(customer.id)

        summary = summarize_tickets(tickets)
        stats.update(summary.as_stats())
        context['recent_tickets'] = summary.recent

        logger.debug(f"✅ [Dashboard] Loaded data for customer {customer.id}")

    except RecordStoreError as e:
        logger.error(f"🔥 [Dashboard] Failed to load data for customer {customer.id}: {e}")
        context['store_available'] = False
        messages.error(request, _("Failed to load dashboard data"))

    return render(request, "dashboard/dashboard.html", context)
