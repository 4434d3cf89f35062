"""
Ticket list filtering and dashboard aggregation.

Everything here is a pure function of an in-memory ticket list; nothing talks
to the record store.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .schemas import STATUS_FILTER_ALL, Ticket, TicketStatus

RECENT_TICKETS_LIMIT = 5


def ticket_matches(ticket: Ticket, search: str = '', status: str = STATUS_FILTER_ALL) -> bool:
    if status and status != STATUS_FILTER_ALL and ticket.status != status:
        return False
    if not search:
        return True
    needle = search.lower()
    return (
        needle in ticket.title.lower()
        or needle in ticket.description.lower()
        # customer ids are matched literally
        or search in ticket.customer_id
    )


def filter_tickets(tickets: Iterable[Ticket], search: str = '', status: str = STATUS_FILTER_ALL) -> list[Ticket]:
    """
    Tickets matching the status filter and the search text, in original order.

    ``status`` is a TicketStatus value or "all". ``search`` matches title and
    description case-insensitively and the owning customer id literally.
    """
    return [ticket for ticket in tickets if ticket_matches(ticket, search, status)]


@dataclass
class TicketSummary:
    """Per-status counts and recent tickets for the dashboard"""

    total: int = 0
    open: int = 0
    in_progress: int = 0
    closed: int = 0
    recent: list[Ticket] = field(default_factory=list)

    def as_stats(self) -> dict[str, int]:
        return {
            'total_tickets': self.total,
            'open_tickets': self.open,
            'in_progress_tickets': self.in_progress,
            'closed_tickets': self.closed,
        }


def summarize_tickets(tickets: Sequence[Ticket], recent_limit: int = RECENT_TICKETS_LIMIT) -> TicketSummary:
    """
    Count tickets by status and pick the most recent ones.

    "Recent" is the last ``recent_limit`` tickets in store insertion order,
    most recent first.
    """
    recent = list(reversed(tickets[-recent_limit:])) if recent_limit > 0 else []
    return TicketSummary(
        total=len(tickets),
        open=sum(1 for t in tickets if t.status == TicketStatus.OPEN),
        in_progress=sum(1 for t in tickets if t.status == TicketStatus.IN_PROGRESS),
        closed=sum(1 for t in tickets if t.status == TicketStatus.CLOSED),
        recent=recent,
    )
