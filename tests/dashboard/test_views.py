"""
Test suite for the dashboard view.
"""

from unittest.mock import patch

from django.test import override_settings

from apps.api_client.services import TransportError
from apps.customers.serializers import create_customer_from_api
from tests.helpers import PortalViewTestCase
from tests.records import ADMIN_CUSTOMER_RECORD, CUSTOMER_RECORD, ticket_record


@override_settings(SESSION_ENGINE='django.contrib.sessions.backends.cache')
class TestDashboardView(PortalViewTestCase):
    @patch('apps.dashboard.views.CustomerAPIClient')
    @patch('apps.dashboard.views.TicketAPIClient')
    def test_admin_stats_cover_all_tickets(self, mock_tickets, mock_customers):
        self.sign_in_admin()
        statuses = ['Open'] * 5 + ['In Progress'] * 4 + ['Closed'] * 3
        mock_tickets.return_value.list_all.return_value = self.tickets(
            *[ticket_record(i, '2', status=s) for i, s in enumerate(statuses, start=1)]
        )
        mock_customers.return_value.list_all.return_value = [
            create_customer_from_api(ADMIN_CUSTOMER_RECORD),
            create_customer_from_api(CUSTOMER_RECORD),
        ]

        response = self.client.get('/dashboard/')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['stats'], {
            'total_tickets': 12,
            'open_tickets': 5,
            'in_progress_tickets': 4,
            'closed_tickets': 3,
            'total_customers': 2,
        })
        self.assertEqual([t.id for t in response.context['recent_tickets']], ['12', '11', '10', '9', '8'])

    @patch('apps.dashboard.views.CustomerAPIClient')
    @patch('apps.dashboard.views.TicketAPIClient')
    def test_customer_stats_cover_own_tickets(self, mock_tickets, mock_customers):
        self.sign_in_customer()
        mock_tickets.return_value.list_by_owner.return_value = self.tickets(
            ticket_record(1, '2'), ticket_record(2, '2', status='Closed'),
        )

        response = self.client.get('/dashboard/')

        stats = response.context['stats']
        self.assertEqual(stats['total_tickets'], 2)
        self.assertEqual(stats['closed_tickets'], 1)
        self.assertEqual(stats['total_customers'], 0)
        mock_tickets.return_value.list_by_owner.assert_called_once_with('2')
        mock_customers.return_value.list_all.assert_not_called()

    @patch('apps.dashboard.views.TicketAPIClient')
    def test_store_failure_shows_zeroes(self, mock_tickets):
        self.sign_in_customer()
        mock_tickets.return_value.list_by_owner.side_effect = TransportError("Record store unavailable")

        response = self.client.get('/dashboard/')

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.context['store_available'])
        self.assertEqual(response.context['stats']['total_tickets'], 0)
        self.assertContains(response, 'Failed to load dashboard data')

    def test_root_redirects_by_sign_in_state(self):
        response = self.client.get('/')
        self.assertEqual(response.url, '/login/')

        self.sign_in_customer()
        response = self.client.get('/')
        self.assertEqual(response.url, '/dashboard/')
