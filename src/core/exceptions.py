"""
Custom exceptions for the Event Reminder API.

This module defines a hierarchical exception system with:
- Machine-readable error codes for API responses
- HTTP status codes resolved by the global exception handlers
- Structured error data for logging and debugging

Design pattern: Base exception → Specific exceptions
- EventServiceError: Base for all application errors
- Specific exceptions inherit from base with predefined error codes
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standardized error codes for API responses.

    Naming convention: <DOMAIN>_<NUMBER>
    - EVENT_xxx: Event resource errors
    - QUERY_xxx: Listing query parameter errors
    - STORE_xxx: Relational store errors
    """

    # Event errors
    EVENT_NOT_FOUND = "EVENT_001"

    # Query errors
    INVALID_FILTER_DATE = "QUERY_001"

    # Store errors
    STORE_ACCESS_FAILED = "STORE_001"

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class EventServiceError(Exception):
    """
    Base exception for all Event Reminder API errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code returned to the client
        error_code: Machine-readable error identifier
        details: Additional context (dict, can include offending input)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to the response envelope.

        Returns:
            dict: ``{"status": "error", "message": ..., "data": {...}}``
        """
        return {
            "status": "error",
            "message": self.message,
            "data": {
                "error": self.error_code.value,
                "details": self.details,
            },
        }

    def __str__(self) -> str:
        """String representation for logging."""
        return f"{self.error_code.value}: {self.message}"


class EventNotFoundError(EventServiceError):
    """
    Raised when no event exists for the requested identifier.

    HTTP Status: 404 Not Found
    """

    def __init__(self, event_id: int, message: str | None = None):
        self.event_id = event_id
        super().__init__(
            message=message or f"Event with ID : {event_id} not found.",
            status_code=404,
            error_code=ErrorCode.EVENT_NOT_FOUND,
            details={"id": event_id},
        )


class InvalidFilterDateError(EventServiceError):
    """
    Raised when the ``afterDate`` listing filter is not an ISO 8601 date.

    Unlike the other listing parameters this one is never defaulted.

    HTTP Status: 400 Bad Request
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            message=f"Invalid afterDate '{value}': expected an ISO 8601 date (YYYY-MM-DD)",
            status_code=400,
            error_code=ErrorCode.INVALID_FILTER_DATE,
            details={"afterDate": value},
        )


class StoreAccessError(EventServiceError):
    """
    Raised when the relational store fails (unavailable, timeout, bad SQL).

    Never retried automatically.

    HTTP Status: 500 Internal Server Error
    """

    def __init__(self, operation: str, message: str = "Event store unavailable"):
        self.operation = operation
        super().__init__(
            message=message,
            status_code=500,
            error_code=ErrorCode.STORE_ACCESS_FAILED,
            details={"operation": operation},
        )
