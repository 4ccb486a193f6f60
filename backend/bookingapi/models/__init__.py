"""
ORM models, one module per table.

Importing this package registers every model with `Base.metadata`, which is
what Alembic and `Database.create_all` read.
"""

from bookingapi.models.admin import AdminUser
from bookingapi.models.blog import BlogPost
from bookingapi.models.category import Category
from bookingapi.models.intake import IntakeSubmission
from bookingapi.models.slot import Slot

__all__ = ["AdminUser", "BlogPost", "Category", "IntakeSubmission", "Slot"]
