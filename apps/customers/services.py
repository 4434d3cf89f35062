# ===============================================================================
# CUSTOMERS API CLIENT SERVICE - RECORD STORE INTEGRATION 👥
# ===============================================================================

import logging
from typing import Any

from apps.api_client.services import RecordStoreClient, RecordStoreError

from .schemas import Customer
from .serializers import create_customer_from_api, customer_fields_to_api

logger = logging.getLogger(__name__)


class CustomerAPIClient(RecordStoreClient):
    """
    Customer records API client.

    Provides typed CRUD access to the 'Customers' collection:
    - List all customers
    - Fetch a customer by id
    - Register / create a customer
    - Update and delete customers (administrator views)
    """

    collection = 'Customers'

    def list_all(self) -> list[Customer]:
        """Fetch every customer record, in store order."""
        try:
            records = self.list_records()
            customers = [create_customer_from_api(record) for record in records]
            logger.info(f"✅ [Customers API] Retrieved {len(customers)} customers")
            return customers

        except RecordStoreError as e:
            logger.error(f"🔥 [Customers API] Error listing customers: {e}")
            raise

    def get_by_id(self, customer_id: str) -> Customer:
        try:
            customer = create_customer_from_api(self.get_record(customer_id))
            logger.info(f"✅ [Customers API] Retrieved customer {customer_id}")
            return customer

        except RecordStoreError as e:
            logger.error(f"🔥 [Customers API] Error retrieving customer {customer_id}: {e}")
            raise

    def create(self, fields: dict[str, Any]) -> Customer:
        """
        Create a customer record.

        Args:
            fields: first_name, last_name, email, phone

        Returns:
            The stored Customer, with store-assigned id and created_at
        """
        try:
            customer = create_customer_from_api(self.create_record(customer_fields_to_api(fields)))
            logger.info(f"✅ [Customers API] Created customer {customer.id}")
            return customer

        except RecordStoreError as e:
            logger.error(f"🔥 [Customers API] Error creating customer: {e}")
            raise

    def update(self, customer_id: str, fields: dict[str, Any]) -> Customer:
        """Partial update; fields not supplied keep their stored values."""
        try:
            customer = create_customer_from_api(
                self.update_record(customer_id, customer_fields_to_api(fields))
            )
            logger.info(f"✅ [Customers API] Updated customer {customer_id}")
            return customer

        except RecordStoreError as e:
            logger.error(f"🔥 [Customers API] Error updating customer {customer_id}: {e}")
            raise

    def delete(self, customer_id: str) -> None:
        try:
            self.delete_record(customer_id)
            logger.info(f"✅ [Customers API] Deleted customer {customer_id}")

        except RecordStoreError as e:
            logger.error(f"🔥 [Customers API] Error deleting customer {customer_id}: {e}")
            raise
