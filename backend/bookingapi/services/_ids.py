"""Identifier parsing shared by the services."""

import uuid

from bookingapi.exceptions import NotFoundError


def parse_id(raw: str, resource: str) -> uuid.UUID:
    """
    Turn a client-supplied id into a UUID.

    A malformed id cannot match any row, so it is reported as NotFoundError
    for `resource` rather than as a validation failure.
    """
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError):
        raise NotFoundError(resource=resource, resource_id=str(raw))
