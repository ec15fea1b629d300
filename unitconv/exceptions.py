# -*- coding: utf-8 -*-
"""Unit Conversion Exception Hierarchy.

Every failure raised by the conversion engine is one of the classes below, so
that the boundary layer can map error kind to a message and status code
without inspecting messages.

Exception Hierarchy:
    UnitConvException (base)
    ├── ValidationError   - malformed, missing or out-of-range input value
    ├── UnitError         - unknown unit, or unit outside the requested category
    ├── ConversionError   - arithmetic produced no defined result
    └── ApplicationError  - anything outside the conversion domain

All exceptions carry:
- message: Human-readable error message
- code: Stable error identifier (e.g. "VALIDATION_ERROR")
- timestamp: When the error occurred (UTC)
- context: Dictionary with error-specific details
- cause: Wrapped exception, if any

Example:
    >>> from unitconv.exceptions import UnitError
    >>> raise UnitError(
    ...     message="Unsupported length unit: 'xx'",
    ...     context={"unit": "xx", "category": "length"}
    ... )
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# ==============================================================================
# Base Exception
# ==============================================================================

class UnitConvException(Exception):
    """Base exception for all conversion engine errors.

    Attributes:
        message: Human-readable error message
        code: Error identifier, defaults to the class DEFAULT_CODE
        context: Dictionary with error-specific details
        cause: Original exception that caused this error
        timestamp: When the error occurred
    """

    DEFAULT_CODE = "GENERIC_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        """Initialize exception with rich context.

        Args:
            message: Human-readable error message
            code: Error identifier (class default if not provided)
            context: Dictionary with error-specific details
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.DEFAULT_CODE
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)
        if cause is not None:
            self.__cause__ = cause
            self.context.setdefault("cause", str(cause))
            self.context.setdefault("cause_type", type(cause).__name__)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization.

        Returns:
            Dictionary with all error details
        """
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        """Convert exception to JSON string."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    def __str__(self) -> str:
        """String representation with error code and message."""
        return f"[{self.code}] - {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"code='{self.code}')"
        )


# ==============================================================================
# Conversion Exceptions
# ==============================================================================

class ValidationError(UnitConvException):
    """Input validation failed.

    Raised when the value is missing, not numeric, not finite, or outside the
    physically plausible range for its category.

    Example:
        >>> raise ValidationError(
        ...     message="Length cannot be negative",
        ...     context={"value": -1.0, "unit": "m"},
        ...     field="value"
        ... )
    """

    DEFAULT_CODE = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
        field: Optional[str] = None,
    ):
        """Initialize validation error.

        Args:
            message: Error message
            code: Error identifier
            context: Error context
            cause: Original exception
            field: Name of the offending request field
        """
        if field:
            context = context or {}
            context["field"] = field
        super().__init__(message, code=code, context=context, cause=cause)


class UnitError(UnitConvException):
    """Unit symbol not recognized, or recognized but outside the category.

    Example:
        >>> raise UnitError(
        ...     message="Unit 'c' is not a length unit",
        ...     unit="c",
        ...     category="length"
        ... )
    """

    DEFAULT_CODE = "UNIT_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
        unit: Optional[str] = None,
        category: Optional[str] = None,
    ):
        """Initialize unit error.

        Args:
            message: Error message
            code: Error identifier
            context: Error context
            cause: Original exception
            unit: The offending unit symbol
            category: The category the unit was checked against
        """
        context = context or {}
        if unit is not None:
            context["unit"] = unit
        if category is not None:
            context["category"] = category
        super().__init__(message, code=code, context=context, cause=cause)


class ConversionError(UnitConvException):
    """Conversion arithmetic could not produce a defined result.

    Converters raise this instead of returning NaN or infinity.
    """

    DEFAULT_CODE = "CONVERSION_ERROR"


class ApplicationError(UnitConvException):
    """Condition outside the conversion domain.

    Raised for misconfiguration (for example a broken factor table detected at
    import) and used to wrap unexpected exceptions at the API boundary.
    """

    DEFAULT_CODE = "APPLICATION_ERROR"


# ==============================================================================
# Exception Utilities
# ==============================================================================

def format_exception_chain(exc: BaseException) -> str:
    """Format exception chain for logging/display.

    Args:
        exc: Exception to format

    Returns:
        Formatted string with full exception chain
    """
    lines = []
    current: Optional[BaseException] = exc

    while current is not None:
        if isinstance(current, UnitConvException):
            lines.append(str(current))
            if current.context:
                lines.append(f"  Context: {current.context}")
        else:
            lines.append(f"{type(current).__name__}: {current}")

        current = current.__cause__

    return "\n".join(lines)


def is_client_error(exc: BaseException) -> bool:
    """Check whether an exception was caused by the caller's input.

    Args:
        exc: Exception to check

    Returns:
        True for validation and unit errors, False otherwise
    """
    return isinstance(exc, (ValidationError, UnitError))
