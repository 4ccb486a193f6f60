"""
Booking API - Request Body Size Middleware
===========================================

What:  Rejects request bodies larger than `max_body_size` with 413.
How:   Two checks:
       1. A declared Content-Length over the limit is answered before the
          body is read.
       2. Every body chunk the app pulls through `receive` is counted, so a
          chunked upload (no Content-Length) or an understated header is
          cut off as soon as the running total passes the limit.
When:  First in the middleware chain.

Blog posts embed images as data URIs, so this ceiling is the only bound
on what lands in blog_posts.image.

Written as plain ASGI rather than BaseHTTPMiddleware: the streaming check
has to sit inside `receive`, which dispatch() never sees.
"""

import logging

from fastapi import HTTPException
from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from bookingapi.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Byte-counting body ceiling.

    Args:
        max_body_size: largest accepted body in bytes
    """

    def __init__(self, app: ASGIApp, max_body_size: int = 2_097_152):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None:
            try:
                length = int(declared)
            except ValueError:
                response = JSONResponse(status_code=400, content={"message": "Invalid Content-Length header"})
                await response(scope, receive, send)
                return

            if length > self.max_body_size:
                self._log_rejection(scope, length)
                exc = PayloadTooLargeError(limit=self.max_body_size)
                response = JSONResponse(status_code=exc.status_code, content={"message": exc.message})
                await response(scope, receive, send)
                return

        received = 0

        async def counting_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    self._log_rejection(scope, received)
                    # HTTPException passes through FastAPI's body parsing untouched
                    # and is rendered by the app's handler as {"message": ...}
                    raise HTTPException(
                        status_code=PayloadTooLargeError.status_code,
                        detail=PayloadTooLargeError.default_message,
                    )
            return message

        await self.app(scope, counting_receive, send)

    def _log_rejection(self, scope: Scope, size: int) -> None:
        logger.warning(
            "Rejected %s %s: body of at least %d bytes exceeds %d",
            scope.get("method", ""),
            scope.get("path", ""),
            size,
            self.max_body_size,
        )
