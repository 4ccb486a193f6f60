"""
Booking API - Services Layer
=============================

What:  Business logic between routes (HTTP) and the database.
How:   Stateless service objects; each call receives the request's
       AsyncSession, so every operation runs inside that request's transaction.

Service Inventory:
    - AuthService:     admin registration and credential checks
    - SlotService:     slot creation, day listing, atomic booking
    - IntakeService:   intake submissions and the "latest unsubmitted" lookup
    - BlogService:     blog posts, filtering, categories derived from posts
    - CategoryService: the explicit category collection
"""
