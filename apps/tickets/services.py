# ===============================================================================
# TICKETS API CLIENT SERVICE - CUSTOMER SUPPORT INTEGRATION 🎫
# ===============================================================================

import logging
from typing import Any

from apps.api_client.services import NotFound, RecordStoreClient, RecordStoreError

from .schemas import Ticket, TicketStatus
from .serializers import create_ticket_from_api, ticket_fields_to_api

logger = logging.getLogger(__name__)


class TicketAPIClient(RecordStoreClient):
    """
    Support tickets API client for portal service.

    Provides typed access to the 'Tickets' collection:
    - List all tickets (administrators)
    - List tickets owned by one customer
    - View ticket details
    - Create new tickets
    - Status transitions and deletion (administrators)
    """

    collection = 'Tickets'

    def list_all(self) -> list[Ticket]:
        """Fetch every ticket, in store insertion order."""
        try:
            tickets = [create_ticket_from_api(record) for record in self.list_records()]
            logger.info(f"✅ [Tickets API] Retrieved {len(tickets)} tickets")
            return tickets

        except RecordStoreError as e:
            logger.error(f"🔥 [Tickets API] Error listing tickets: {e}")
            raise

    def list_by_owner(self, customer_id: str) -> list[Ticket]:
        """
        Get the tickets filed by one customer.

        Uses the store's ``customerId`` query filter. The store answers an empty
        filter result with 404 and matches the filter as a substring, so both are
        normalised here: 404 becomes an empty list and only exact owner matches
        are kept.
        """
        customer_id = str(customer_id)
        try:
            records = self.list_records(params={'customerId': customer_id})
        except NotFound:
            logger.info(f"✅ [Tickets API] No tickets for customer {customer_id}")
            return []
        except RecordStoreError as e:
            logger.error(f"🔥 [Tickets API] Error retrieving tickets for customer {customer_id}: {e}")
            raise

        tickets = [create_ticket_from_api(record) for record in records]
        owned = [ticket for ticket in tickets if ticket.customer_id == customer_id]
        logger.info(f"✅ [Tickets API] Retrieved {len(owned)} tickets for customer {customer_id}")
        return owned

    def get_by_id(self, ticket_id: str) -> Ticket:
        try:
            ticket = create_ticket_from_api(self.get_record(ticket_id))
            logger.info(f"✅ [Tickets API] Retrieved ticket {ticket_id}")
            return ticket

        except RecordStoreError as e:
            logger.error(f"🔥 [Tickets API] Error retrieving ticket {ticket_id}: {e}")
            raise

    def create(self, fields: dict[str, Any]) -> Ticket:
        """
        Create a new support ticket.

        Args:
            fields: customer_id, title, description and optionally status
                    (defaults to Open)

        Returns:
            The stored Ticket
        """
        payload = {'status': TicketStatus.OPEN, **fields}
        try:
            ticket = create_ticket_from_api(self.create_record(ticket_fields_to_api(payload)))
            logger.info(f"✅ [Tickets API] Created ticket {ticket.id} for customer {ticket.customer_id}")
            return ticket

        except RecordStoreError as e:
            logger.error(f"🔥 [Tickets API] Error creating ticket for customer {fields.get('customer_id')}: {e}")
            raise

    def update(self, ticket_id: str, fields: dict[str, Any]) -> Ticket:
        try:
            ticket = create_ticket_from_api(self.update_record(ticket_id, ticket_fields_to_api(fields)))
            logger.info(f"✅ [Tickets API] Updated ticket {ticket_id}")
            return ticket

        except RecordStoreError as e:
            logger.error(f"🔥 [Tickets API] Error updating ticket {ticket_id}: {e}")
            raise

    def update_status(self, ticket_id: str, status: str) -> Ticket:
        """Administrator status transition"""
        if status not in TicketStatus.values:
            raise ValueError(f"Unknown ticket status: {status!r}")
        return self.update(ticket_id, {'status': status})

    def delete(self, ticket_id: str) -> None:
        try:
            self.delete_record(ticket_id)
            logger.info(f"✅ [Tickets API] Deleted ticket {ticket_id}")

        except RecordStoreError as e:
            logger.error(f"🔥 [Tickets API] Error deleting ticket {ticket_id}: {e}")
            raise
