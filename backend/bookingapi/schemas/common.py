"""
Booking API - Shared Pydantic Schemas
======================================

What:  Response envelopes and helpers shared by every resource.
Who:   Route handlers (response_model) and exception handlers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


def naive_wall_clock(value: Optional[datetime]) -> Optional[datetime]:
    """
    Drop tzinfo without converting.

    Slot and submission dates are compared as local wall-clock values, so
    "2024-01-01T09:00:00Z" is stored as 2024-01-01 09:00:00.
    """
    if value is not None and value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


class MessageResponse(BaseModel):
    """Plain confirmation body, e.g. {"message": "Slot added successfully"}."""
    message: str = Field(description="Human-readable result")


class ErrorResponse(BaseModel):
    """
    Error body returned for every 4xx/5xx response.

    No machine-readable error codes are exposed; correlate with server logs
    through the X-Request-ID response header.
    """
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
