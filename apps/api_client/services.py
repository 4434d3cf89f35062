"""
Record Store API Client (Portal → Record Store)

The record store is a generic JSON REST service holding one collection per
resource kind ('Customers', 'Tickets'). Every collection follows the same
URL convention:

- GET    /{Collection}            list all records
- GET    /{Collection}/{id}       fetch one record
- POST   /{Collection}            create (store assigns 'id' and 'createdAt')
- PUT    /{Collection}/{id}       partial update (unspecified fields are kept)
- DELETE /{Collection}/{id}       remove

The portal never treats its in-memory copies as authoritative: after any
mutation, views re-fetch the full list from the store.
"""

# ===============================================================================
# RECORD STORE CLIENT SERVICE - PORTAL TO STORE COMMUNICATION 🔗
# ===============================================================================

import logging
from typing import Any

import requests
from django.conf import settings

# HTTP status code constants
HTTP_OK = 200
HTTP_MULTIPLE_CHOICES = 300
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_UNPROCESSABLE_ENTITY = 422

# Fields the store assigns itself; never sent on create
STORE_ASSIGNED_FIELDS = ('id', 'createdAt')

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Base exception for every record store failure"""
    def __init__(self, message: str, status_code: int | None = None, response_data: Any = None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(message)


class TransportError(RecordStoreError):
    """Network or HTTP-layer failure (no usable response)"""


class NotFound(RecordStoreError):
    """The store has no record for an id-scoped operation"""


class ValidationError(RecordStoreError):
    """The store rejected a create/update payload, or returned a malformed record"""


class RecordStoreClient:
    """
    Raw JSON accessor for one record store collection.
    Resource clients subclass it and convert records to dataclasses.

    Handles:
    - URL building from the configured base endpoint
    - JSON encoding/decoding
    - Mapping HTTP failures onto the RecordStoreError taxonomy

    No retries are performed; failures surface to the caller as-is.
    """

    collection: str = ''

    def __init__(self, collection: str | None = None) -> None:
        if collection is not None:
            self.collection = collection
        self.base_url = settings.RECORD_STORE_BASE_URL
        self.timeout = settings.RECORD_STORE_TIMEOUT

    # ---- Small helpers to keep _make_request flat ----
    def _build_url(self, record_id: str | None = None) -> str:
        url = f"{self.base_url.rstrip('/')}/{self.collection}"
        if record_id is not None:
            url = f"{url}/{record_id}"
        return url

    def _handle_api_response(self, response: requests.Response, url: str) -> Any:
        if HTTP_OK <= response.status_code < HTTP_MULTIPLE_CHOICES:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise TransportError(
                    f"Invalid JSON from record store: {url}",
                    status_code=response.status_code,
                ) from e

        try:
            error_data = response.json()
        except ValueError:
            error_data = {'error': response.text or 'Invalid response format'}

        if response.status_code == HTTP_NOT_FOUND:
            raise NotFound(
                f"Record not found: {url}",
                status_code=response.status_code,
                response_data=error_data,
            )
        if response.status_code in (HTTP_BAD_REQUEST, HTTP_UNPROCESSABLE_ENTITY):
            raise ValidationError(
                f"Record store rejected payload: {error_data}",
                status_code=response.status_code,
                response_data=error_data,
            )
        raise TransportError(
            f"Record store request failed with HTTP {response.status_code}",
            status_code=response.status_code,
            response_data=error_data,
        )

    def _make_request(self, method: str, record_id: str | None = None,
                      data: dict | None = None, params: dict | None = None) -> Any:
        """Perform one JSON request against the collection"""
        url = self._build_url(record_id)

        try:
            response = requests.request(
                method=method,
                url=url,
                json=data,
                params=params if params else None,
                headers={'Accept': 'application/json'},
                timeout=self.timeout,
            )

            logger.debug(f"🌐 [Record Store] {method} {url} -> {response.status_code}")

            return self._handle_api_response(response, url)

        except requests.exceptions.ConnectionError as e:
            logger.error(f"🔥 [Record Store] Connection failed: {url}")
            raise TransportError("Record store unavailable") from e
        except requests.exceptions.Timeout as e:
            logger.error(f"🔥 [Record Store] Timeout connecting to record store: {url}")
            raise TransportError("Record store timeout") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"🔥 [Record Store] Request error: {e}")
            raise TransportError(f"Request failed: {e!s}") from e

    # ===============================================================================
    # COLLECTION OPERATIONS (raw JSON)
    # ===============================================================================

    def list_records(self, params: dict | None = None) -> list[dict[str, Any]]:
        data = self._make_request('GET', params=params)
        if not isinstance(data, list):
            raise TransportError(
                f"Expected a list from {self.collection}, got {type(data).__name__}",
                response_data=data,
            )
        return data

    def get_record(self, record_id: str) -> dict[str, Any]:
        data = self._make_request('GET', record_id=str(record_id))
        if not data:
            raise NotFound(f"{self.collection} record {record_id} not found")
        return data

    def create_record(self, fields: dict[str, Any]) -> dict[str, Any]:
        payload = {k: v for k, v in fields.items() if k not in STORE_ASSIGNED_FIELDS}
        return self._make_request('POST', data=payload)

    def update_record(self, record_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        # id is immutable once assigned
        payload = {k: v for k, v in fields.items() if k != 'id'}
        return self._make_request('PUT', record_id=str(record_id), data=payload)

    def delete_record(self, record_id: str) -> None:
        self._make_request('DELETE', record_id=str(record_id))
