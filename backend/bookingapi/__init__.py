"""
Booking API - Application Package
==================================

A small FastAPI backend for appointment slots, intake submissions, admin
login and a blog/category catalog.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← booking rules, conflicts
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
