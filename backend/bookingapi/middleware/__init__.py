"""
Booking API - Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Body Size Limit] → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Body Size Limit FIRST: reject oversized uploads before anything reads them
    2. Request ID: generate correlation ID for logging and tracing
    3. Logging: log request details with the generated request ID
    4. CORS: applied by FastAPI's CORSMiddleware (handles preflight)

    The order is reversed for responses, so the request ID header and the
    access log line both see the final status code.
"""
