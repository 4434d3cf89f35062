"""
Logging utilities for the Helpdesk Portal.

- Thread-local request context (request id, signed-in customer)
- RequestIDFilter: injects the context into every log record
- PortalJSONFormatter: structured JSON lines for prod
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import UTC, datetime
from typing import Any

# Thread-local storage for request context
_request_context = threading.local()

EMPTY_REQUEST_ID = "-"


# =============================================================================
# REQUEST CONTEXT FUNCTIONS
# =============================================================================


def get_request_id() -> str | None:
    return getattr(_request_context, "request_id", None)


def set_request_context(**kwargs: Any) -> None:
    """Set request context for the current thread"""
    for key, value in kwargs.items():
        setattr(_request_context, key, value)


def get_request_context() -> dict[str, Any]:
    return {
        "request_id": getattr(_request_context, "request_id", EMPTY_REQUEST_ID),
        "customer_id": getattr(_request_context, "customer_id", None),
    }


def clear_request_context() -> None:
    """Clear request context for the current thread"""
    for attr in ["request_id", "customer_id"]:
        if hasattr(_request_context, attr):
            delattr(_request_context, attr)


# =============================================================================
# REQUEST ID FILTER - Structured Logging with Request Correlation
# =============================================================================


class RequestIDFilter(logging.Filter):
    """
    Add request ID and customer id to log records.

    Records logged outside a request get "-" so format strings never fail.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = getattr(_request_context, "request_id", None) or EMPTY_REQUEST_ID  # type: ignore[attr-defined]
        if not hasattr(record, "customer_id"):
            record.customer_id = getattr(_request_context, "customer_id", None)  # type: ignore[attr-defined]
        return True


class ServiceNameFilter(logging.Filter):
    """Stamp every record with the service name for the unified console format"""

    def __init__(self, service_name: str = "portal") -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = self.service_name  # type: ignore[attr-defined]
        return True


class PortalJSONFormatter(logging.Formatter):
    """Structured JSON log formatter for the prod environment."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", EMPTY_REQUEST_ID),
            "customer_id": getattr(record, "customer_id", None),
            "service": "portal",
        }
        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)
