"""
Booking API - Routes Package
=============================

Route Inventory:
    - auth.py:        POST /api/register, POST /api/login
    - slots.py:       POST/GET /api/slots, POST /api/slots/book,
                      PUT /api/slots/book/{slot_id}
    - intake.py:      POST /data, GET /api/latestdata, GET /getData
    - blogs.py:       /api/blogs, /api/blogs/{id}, /api/blogsfilter,
                      GET /api/categories
    - categories.py:  POST /add-category, GET /api/getcategories
    - health.py:      GET /health, GET /

Routes stay thin: pull data out of the request, call a service, pick the
status code. Business rules live in bookingapi.services.
"""
