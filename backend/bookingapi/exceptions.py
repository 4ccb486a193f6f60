"""
Booking API - Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each class fixes its HTTP status and a default message; instances add
       an optional context dict. Global exception handlers (main.py) turn
       them into `{"message": ...}` JSON bodies.
Who:   Raised by services and middleware; caught by global handlers.

Exception Hierarchy:
    BookingAPIError (base)
    ├── ValidationError          → 400 Bad Request
    ├── ConflictError            → 400 Bad Request (duplicate / already booked)
    ├── AuthError                → 401 Unauthorized
    ├── NotFoundError            → 404 Not Found
    ├── PayloadTooLargeError     → 413 Payload Too Large
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class BookingAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = dict(context or {})
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status={self.status_code})"


class ValidationError(BookingAPIError):
    """Missing required field, unparseable date, empty category name."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message=None, field: Optional[str] = None, context=None):
        super().__init__(message, context)
        self.field = field
        if field:
            self.context["field"] = field


class ConflictError(BookingAPIError):
    """
    A write would duplicate an existing record or repeat a one-way state
    change: same slot date/time/mode, taken category or admin name, slot
    already booked. The API has no dedicated 409, so this is a 400.
    """

    status_code = 400
    default_message = "Resource already exists"


class AuthError(BookingAPIError):
    status_code = 401
    default_message = "Invalid password"


class NotFoundError(BookingAPIError):
    """
    Lookup by id (slot, submission, blog post) or by admin name missed.

    SQLAlchemy returns None for missing records; services convert
    None → NotFoundError so routes stay free of status-code logic.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message or f"{resource} not found", context)
        self.context["resource"] = resource
        if resource_id:
            self.context["resource_id"] = resource_id


class PayloadTooLargeError(BookingAPIError):
    status_code = 413
    default_message = "Payload too large. Please upload a smaller file."

    def __init__(self, limit: int = 0, context=None):
        super().__init__(None, context)
        self.limit = limit
        self.context["limit"] = limit


class DatabaseError(BookingAPIError):
    """
    Connection lost mid-query or an unexpected driver error.

    The client only ever sees the generic message; driver details are
    logged server-side.
    """

    status_code = 500
    default_message = "Server error"
