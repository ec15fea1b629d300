"""
Request/response helpers for HTTP callers of the conversion engine.
"""

from .responses import (
    ErrorResponse,
    STATUS_BY_ERROR,
    error_payload,
    handle_conversion,
    status_for,
    success_payload,
)

__all__ = [
    "ErrorResponse",
    "STATUS_BY_ERROR",
    "error_payload",
    "handle_conversion",
    "status_for",
    "success_payload",
]
