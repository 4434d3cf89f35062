"""
Shared helpers for the Helpdesk Portal.
"""

from datetime import UTC, datetime
from typing import Any

from django.utils import timezone
from django.utils.dateparse import parse_datetime


def parse_store_timestamp(value: Any) -> datetime | None:
    """Parse an ISO timestamp from the record store; None when absent or malformed"""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = parse_datetime(value)
    except ValueError:
        return None
    if parsed and timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, UTC)
    return parsed
