"""Intake submission ("Data") schemas for POST /data and the listing routes."""

import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator

from bookingapi.schemas.common import naive_wall_clock


class IntakeCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    date: datetime
    time: str = Field(min_length=1)
    mode: str = Field(min_length=1)
    email: str = Field(min_length=1)
    is_submitted: bool = Field(
        default=False,
        validation_alias=AliasChoices("isSubmitted", "is_submitted"),
    )

    @field_validator("date")
    @classmethod
    def strip_timezone(cls, v: datetime) -> datetime:
        return naive_wall_clock(v)


class IntakeResponse(BaseModel):
    id: uuid.UUID
    name: str
    phone: str
    date: datetime
    time: str
    mode: str
    email: str
    is_submitted: bool = Field(
        serialization_alias="isSubmitted",
        validation_alias=AliasChoices("is_submitted", "isSubmitted"),
    )
    created_at: datetime = Field(
        serialization_alias="createdAt",
        validation_alias=AliasChoices("created_at", "createdAt"),
    )

    model_config = {"from_attributes": True}
