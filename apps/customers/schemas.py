"""
Portal Customer Schemas - Record Store Data Structures
Pure Python dataclasses for representing customer records from the record store.
NO DATABASE MODELS - API-only communication.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class Customer:
    """Customer record from the record store"""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str = ""
    created_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email

    def to_api(self) -> dict[str, Any]:
        """Wire representation (camelCase, ISO timestamp)"""
        return {
            'id': self.id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
