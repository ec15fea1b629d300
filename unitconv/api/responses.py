# -*- coding: utf-8 -*-
"""
unitconv/api/responses.py

Response framing for HTTP callers of the conversion engine.

The engine does not serve HTTP itself. A request handler for
``POST /api/{length|weight|temperature}/convert`` passes the category and the
decoded JSON body to ``handle_conversion`` and writes back the returned
status and payload:

- success: ``{"result": r, "input": {"value": v, "from": f, "to": t}}``
- failure: ``{"error": message, "code": code}``
"""

import logging
from http import HTTPStatus
from typing import Any, Dict, Mapping, Tuple, Type, Union

from pydantic import BaseModel, Field

from unitconv.calculation.conversion_service import convert_request
from unitconv.calculation.models import ConversionRequest
from unitconv.data.units import Category
from unitconv.exceptions import (
    ApplicationError,
    ConversionError,
    UnitConvException,
    UnitError,
    ValidationError,
)

logger = logging.getLogger(__name__)


STATUS_BY_ERROR: Tuple[Tuple[Type[UnitConvException], HTTPStatus], ...] = (
    (ValidationError, HTTPStatus.BAD_REQUEST),
    (UnitError, HTTPStatus.BAD_REQUEST),
    (ConversionError, HTTPStatus.INTERNAL_SERVER_ERROR),
    (ApplicationError, HTTPStatus.INTERNAL_SERVER_ERROR),
)


class ErrorResponse(BaseModel):
    """Error body returned to HTTP callers"""
    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Stable error code, e.g. UNIT_ERROR")


def status_for(exc: BaseException) -> int:
    """
    Choose the HTTP status for an exception.

    Validation and unit errors are the caller's fault (400); everything else,
    including exceptions outside the taxonomy, is a server error (500).
    """
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return int(status)
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)


def error_payload(exc: BaseException) -> Dict[str, str]:
    """Build the ``{"error", "code"}`` body for an exception."""
    if isinstance(exc, UnitConvException):
        body = ErrorResponse(error=exc.message, code=exc.code)
    else:
        body = ErrorResponse(error="Internal server error", code=ApplicationError.DEFAULT_CODE)
    return body.model_dump()


def success_payload(result: float, value: float, from_unit: str, to_unit: str) -> Dict[str, Any]:
    """Build the success body for a finished conversion."""
    return {
        "result": result,
        "input": {"value": value, "from": from_unit, "to": to_unit},
    }


def handle_conversion(
    category: Union[str, Category],
    body: Mapping[str, Any],
) -> Tuple[int, Dict[str, Any]]:
    """
    Run one conversion request end to end.

    Args:
        category: Path segment of the route ('length', 'weight', 'temperature')
        body: Decoded JSON body with "value", "from" and "to"

    Returns:
        Tuple of (HTTP status code, JSON-serializable payload)
    """
    try:
        request = ConversionRequest.from_payload(category, body)
        outcome = convert_request(request)
    except UnitConvException as e:
        return status_for(e), error_payload(e)
    except Exception as e:
        logger.error(f"Unexpected error converting {category!r}: {e}", exc_info=True)
        wrapped = ApplicationError(
            "Unexpected error during conversion",
            cause=e,
            context={"category": str(category)},
        )
        return status_for(wrapped), error_payload(wrapped)

    return int(HTTPStatus.OK), success_payload(
        outcome.result,
        outcome.input.value,
        outcome.input.from_unit,
        outcome.input.to_unit,
    )
