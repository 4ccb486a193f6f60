"""
Booking API - Request Logging Middleware
=========================================

What:  One access log line per HTTP request.
How:   Times the rest of the stack and logs method, path, status, duration,
       request ID and client IP. A request that blows up before producing a
       response is logged as a 500 and the exception is re-raised.
When:  After RequestIDMiddleware (uses request ID for correlation).

Request bodies are never logged: intake submissions carry names, phone
numbers and emails, and register/login carry passwords.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bookingapi.middleware.request_id import request_id_var

logger = logging.getLogger("bookingapi.access")

# Probes hit these every few seconds
QUIET_PATHS = frozenset({"/health", "/"})


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            self._log(request, status, (time.perf_counter() - started) * 1000)

    @staticmethod
    def _log(request: Request, status: int, duration_ms: float) -> None:
        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
