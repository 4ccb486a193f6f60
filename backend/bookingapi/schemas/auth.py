"""Admin credential schemas for POST /api/register and POST /api/login."""

from pydantic import BaseModel, Field


class AdminCredentials(BaseModel):
    admin: str = Field(min_length=1, max_length=150, description="Admin login name")
    password: str = Field(min_length=1, description="Plaintext password (hashed before storage)")
