"""
Booking API - Slot Schemas
===========================

Wire names follow the existing frontend: `starttime`, `endtime`, `isBooked`.
Request bodies also accept `startTime` / `endTime`.
"""

import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator

from bookingapi.schemas.common import naive_wall_clock


class SlotCreate(BaseModel):
    """Body of POST /api/slots."""

    date: datetime = Field(description="Calendar day (YYYY-MM-DD or ISO 8601 datetime)")
    start_time: str = Field(
        min_length=1,
        validation_alias=AliasChoices("starttime", "startTime", "start_time"),
        description="Start time, HH:MM",
    )
    end_time: str = Field(
        min_length=1,
        validation_alias=AliasChoices("endtime", "endTime", "end_time"),
        description="End time, HH:MM",
    )
    mode: str = Field(min_length=1, description="e.g. online, in-person")

    @field_validator("date")
    @classmethod
    def strip_timezone(cls, v: datetime) -> datetime:
        return naive_wall_clock(v)


class SlotResponse(BaseModel):
    id: uuid.UUID
    date: datetime
    start_time: str = Field(
        serialization_alias="starttime",
        validation_alias=AliasChoices("start_time", "starttime"),
    )
    end_time: str = Field(
        serialization_alias="endtime",
        validation_alias=AliasChoices("end_time", "endtime"),
    )
    mode: str
    is_booked: bool = Field(
        serialization_alias="isBooked",
        validation_alias=AliasChoices("is_booked", "isBooked"),
    )

    model_config = {"from_attributes": True}


class BookingRequest(BaseModel):
    """
    Body of POST /api/slots/book.

    Ids are kept as strings; a malformed id is reported as "not found",
    the same as a well-formed id that matches nothing.
    """

    slot_id: str = Field(validation_alias=AliasChoices("slotId", "slot_id"), min_length=1)
    data_id: str = Field(validation_alias=AliasChoices("dataId", "data_id"), min_length=1)


class BookingResponse(BaseModel):
    message: str = Field(default="Slot booked successfully")
    slot: SlotResponse
