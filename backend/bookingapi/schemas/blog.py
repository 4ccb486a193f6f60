"""
Booking API - Blog & Category Schemas
======================================

What:  Request/response models for /api/blogs*, /add-category and the two
       category listings.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class BlogCreate(BaseModel):
    """
    Body of POST /api/blogs.

    image:    data URI or URL, stored verbatim
    category: free-form; not checked against the categories table
    """
    title: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1)
    image: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=200)


class BlogResponse(BaseModel):
    id: uuid.UUID
    title: str
    content: str
    image: Optional[str] = None
    category: Optional[str] = None
    created_at: datetime = Field(
        serialization_alias="createdAt",
        validation_alias=AliasChoices("created_at", "createdAt"),
    )

    model_config = {"from_attributes": True}


class CategoryCreate(BaseModel):
    """Body of POST /add-category. Emptiness is checked by the service."""
    category: Optional[str] = None


class CategoryResponse(BaseModel):
    id: uuid.UUID
    name: str

    model_config = {"from_attributes": True}
