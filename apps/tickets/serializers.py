"""
Portal Ticket Serializers - Record Store Response Conversion Functions
"""

from typing import Any

from apps.api_client.services import ValidationError
from apps.common.utils import parse_store_timestamp

from .schemas import Ticket, TicketStatus

TICKET_FIELD_MAP = {
    'customer_id': 'customerId',
    'title': 'title',
    'description': 'description',
    'status': 'status',
}


def create_ticket_from_api(data: dict[str, Any]) -> Ticket:
    """Create Ticket dataclass from record store JSON"""
    if not isinstance(data, dict) or not data.get('id'):
        raise ValidationError("Ticket record without id", response_data=data)

    # Unknown statuses are kept verbatim so they still show up under "all"
    return Ticket(
        id=str(data['id']),
        customer_id=str(data.get('customerId') or ''),
        title=str(data.get('title') or ''),
        description=str(data.get('description') or ''),
        status=data.get('status') or TicketStatus.OPEN,
        created_at=parse_store_timestamp(data.get('createdAt')),
    )


def ticket_fields_to_api(fields: dict[str, Any]) -> dict[str, Any]:
    payload = {
        wire_name: fields[name]
        for name, wire_name in TICKET_FIELD_MAP.items()
        if name in fields
    }
    if 'status' in payload:
        payload['status'] = str(payload['status'])
    return payload
