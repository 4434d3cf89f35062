"""
Shared base class for portal view tests.
"""

from django.test import Client, SimpleTestCase

from apps.tickets.serializers import create_ticket_from_api
from apps.users.session import SESSION_USER_KEY
from tests.records import ADMIN_CUSTOMER_RECORD, CUSTOMER_RECORD


class PortalViewTestCase(SimpleTestCase):
    """Signed-in session helpers shared by the view tests"""

    def setUp(self):
        self.client = Client()

    def _sign_in(self, record):
        session = self.client.session
        session[SESSION_USER_KEY] = record
        session.save()

    def sign_in_customer(self):
        self._sign_in(CUSTOMER_RECORD)

    def sign_in_admin(self):
        self._sign_in(ADMIN_CUSTOMER_RECORD)

    @staticmethod
    def tickets(*records):
        return [create_ticket_from_api(record) for record in records]
