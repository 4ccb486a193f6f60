"""
Booking API - Request ID Middleware
====================================

What:  Tags every request with an ID and returns it in X-Request-ID.
How:   A client-supplied X-Request-ID is honoured when it is short and
       printable; otherwise an 8-character hex ID is minted. The ID lives in
       a ContextVar for loggers and in request.state for handlers.

Error bodies carry only a message, so this header is how a client report is
matched to server-side log lines.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

HEADER = "X-Request-ID"
MAX_CLIENT_ID_LENGTH = 64

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def _choose_request_id(supplied: Optional[str]) -> str:
    if supplied and len(supplied) <= MAX_CLIENT_ID_LENGTH and supplied.isprintable():
        return supplied
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = _choose_request_id(request.headers.get(HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[HEADER] = rid
        return response
