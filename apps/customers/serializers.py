"""
Portal Customer Serializers - Record Store Response Conversion Functions
Convert record store JSON to portal dataclass instances and back.
"""

from typing import Any

from apps.api_client.services import ValidationError
from apps.common.utils import parse_store_timestamp

from .schemas import Customer

# Form/attribute name -> wire name
CUSTOMER_FIELD_MAP = {
    'first_name': 'firstName',
    'last_name': 'lastName',
    'email': 'email',
    'phone': 'phone',
}


def create_customer_from_api(data: dict[str, Any]) -> Customer:
    """Create Customer dataclass from record store JSON"""
    if not isinstance(data, dict) or not data.get('id'):
        raise ValidationError("Customer record without id", response_data=data)

    return Customer(
        id=str(data['id']),
        first_name=str(data.get('firstName') or ''),
        last_name=str(data.get('lastName') or ''),
        email=str(data.get('email') or ''),
        phone=str(data.get('phone') or ''),
        created_at=parse_store_timestamp(data.get('createdAt')),
    )


def customer_fields_to_api(fields: dict[str, Any]) -> dict[str, Any]:
    """Translate snake_case form data into wire field names, dropping unknown keys"""
    return {
        wire_name: fields[name]
        for name, wire_name in CUSTOMER_FIELD_MAP.items()
        if name in fields
    }
