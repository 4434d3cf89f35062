"""
Portal Ticket Schemas - Record Store Data Structures
Pure Python dataclasses for representing support tickets from the record store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from django.db import models
from django.utils.translation import gettext_lazy as _


class TicketStatus(models.TextChoices):
    """Ticket lifecycle states, valued with their wire spellings"""

    OPEN = 'Open', _('Open')
    IN_PROGRESS = 'In Progress', _('In Progress')
    CLOSED = 'Closed', _('Closed')


# Status filter value meaning "no status filter"
STATUS_FILTER_ALL = 'all'


@dataclass
class Ticket:
    """Support ticket record from the record store"""

    id: str
    customer_id: str
    title: str
    description: str
    status: str = TicketStatus.OPEN
    created_at: datetime | None = None

    @property
    def status_slug(self) -> str:
        """CSS-friendly status name ('open', 'in-progress', 'closed')"""
        return str(self.status).lower().replace(' ', '-')

    def to_api(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'customerId': self.customer_id,
            'title': self.title,
            'description': self.description,
            'status': str(self.status),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
