"""Shared middleware for cross-cutting concerns.

The request context middleware tags every log event emitted while a request
is being handled with that request's id.
"""

from shared_kernel.middleware.request_context import (
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
)

__all__ = ["REQUEST_ID_HEADER", "RequestContextMiddleware"]
