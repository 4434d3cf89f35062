"""
Portal Session Holder
Keeps the signed-in Customer in the Django session (the portal's durable storage).

The administrator flag is never stored: it is recomputed from the identity on
every read, so it cannot drift from the signed-in customer.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from apps.api_client.services import ValidationError
from apps.customers.schemas import Customer
from apps.customers.serializers import create_customer_from_api
from apps.customers.services import CustomerAPIClient

logger = logging.getLogger(__name__)

# Session key holding the serialized signed-in Customer
SESSION_USER_KEY = 'user'

# The customer with this id is the sole administrator
ADMIN_CUSTOMER_ID = '1'


def is_admin_customer(customer: Customer | None) -> bool:
    return customer is not None and customer.id == ADMIN_CUSTOMER_ID


class PortalSession:
    """
    Session identity holder, created per request by PortalSessionMiddleware and
    passed to views as ``request.portal_session``.

    Lifecycle: ``restore()`` reads the identity back from storage, ``sign_in()``
    and ``sign_out()`` rewrite or clear it immediately.
    """

    def __init__(self, storage: MutableMapping[str, Any], customer_client: CustomerAPIClient | None = None):
        self._storage = storage
        self._customer_client = customer_client
        self._customer: Customer | None = None

    @classmethod
    def restore(cls, storage: MutableMapping[str, Any],
                customer_client: CustomerAPIClient | None = None) -> PortalSession:
        """Rebuild the session identity from storage, discarding corrupt entries"""
        session = cls(storage, customer_client)
        saved = storage.get(SESSION_USER_KEY)
        if saved:
            try:
                session._customer = create_customer_from_api(saved)
            except ValidationError as e:
                logger.warning(f"⚠️ [Portal Session] Discarding unreadable stored identity: {e}")
                storage.pop(SESSION_USER_KEY, None)
        return session

    @property
    def customers(self) -> CustomerAPIClient:
        if self._customer_client is None:
            self._customer_client = CustomerAPIClient()
        return self._customer_client

    @property
    def customer(self) -> Customer | None:
        return self._customer

    @property
    def is_authenticated(self) -> bool:
        return self._customer is not None

    @property
    def is_admin(self) -> bool:
        return is_admin_customer(self._customer)

    def sign_in(self, email: str, password: str) -> bool:
        """
        Sign in by email lookup.

        The first customer whose email matches case-insensitively becomes the
        session identity. The password is not checked against anything: the
        record store holds no credentials. Record store errors propagate.
        """
        wanted = (email or '').strip().lower()
        if not wanted:
            return False

        for candidate in self.customers.list_all():
            if candidate.email.lower() == wanted:
                self._store(candidate)
                logger.info(f"✅ [Portal Session] Customer {candidate.id} signed in")
                return True

        logger.warning(f"⚠️ [Portal Session] No customer registered with email {email}")
        return False

    def sign_out(self) -> None:
        if self._customer is not None:
            logger.info(f"✅ [Portal Session] Customer {self._customer.id} signed out")
        self._customer = None
        flush = getattr(self._storage, 'flush', None)
        if callable(flush):
            # Django sessions: drop the data and rotate the key
            flush()
        else:
            self._storage.pop(SESSION_USER_KEY, None)

    def refresh(self, customer: Customer) -> None:
        """Rewrite the stored identity after the signed-in customer's record changed"""
        if self._customer is not None and customer.id == self._customer.id:
            self._store(customer)

    def _store(self, customer: Customer) -> None:
        cycle_key = getattr(self._storage, 'cycle_key', None)
        if callable(cycle_key) and self._customer is None:
            # Prevent session fixation on sign-in
            cycle_key()
        self._customer = customer
        self._storage[SESSION_USER_KEY] = customer.to_api()
