# -*- coding: utf-8 -*-
"""Generic input validation and sanitization.

Category-agnostic checks that every category validator composes: numeric
well-formedness, finite and range checks, and string trimming. All functions
are pure and raise ValidationError on failure.
"""

import math
import re
from decimal import Decimal
from typing import Any, Optional, Pattern, Union

from unitconv.exceptions import ValidationError

Number = Union[int, float, Decimal]


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a measurement
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def sanitize_string_input(value: Any) -> Any:
    """Trim surrounding whitespace; non-strings are returned unchanged."""
    if not isinstance(value, str):
        return value
    return value.strip()


def sanitize_numeric_input(value: Any) -> Any:
    """Normalize a numeric-looking value before validation.

    Numbers pass through as floats, or ``nan`` when they have no float
    representation. Strings are trimmed, a single leading
    ``+`` is removed, and the remainder is parsed; a string that does not
    parse becomes ``nan`` so the numeric check rejects it. Other types are
    returned unchanged.

    Args:
        value: Raw input.

    Returns:
        Float, ``nan`` for unparseable strings, or the original object.
    """
    if _is_number(value):
        # huge ints overflow, Decimal sNaN refuses conversion
        try:
            return float(value)
        except (OverflowError, ValueError):
            return math.nan

    if not isinstance(value, str):
        return value

    text = value.strip()
    if text.startswith("+"):
        text = text[1:]
        if text[:1] in ("+", "-"):
            return math.nan
    # float() accepts "1_000" digit grouping
    if not text or "_" in text:
        return math.nan

    try:
        return float(text)
    except ValueError:
        return math.nan


def validate_numeric_input(value: Any, field: str = "value") -> float:
    """Validate a number or numeric string.

    Args:
        value: Raw input (int, float, Decimal or numeric string).
        field: Field name reported in the error context.

    Returns:
        The value as a finite float.

    Raises:
        ValidationError: If the value is missing, of the wrong type, empty,
            not numeric, NaN or infinite.
    """
    if value is None:
        raise ValidationError(f"{field} is required", field=field)

    if not _is_number(value) and not isinstance(value, str):
        raise ValidationError(
            "Value must be a number or numeric string",
            field=field,
            context={"type": type(value).__name__},
        )

    if isinstance(value, str) and not value.strip():
        raise ValidationError(f"{field} cannot be empty", field=field)

    number = sanitize_numeric_input(value)

    if math.isnan(number):
        raise ValidationError(
            "Value must be a valid number",
            field=field,
            context={"raw": value if isinstance(value, str) else repr(value)},
        )

    if math.isinf(number):
        raise ValidationError(
            "Value must be a finite number",
            field=field,
            context={"raw": value if isinstance(value, str) else repr(value)},
        )

    return number


def validate_string_input(
    value: Any,
    field: str = "value",
    required: bool = False,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    pattern: Union[str, Pattern[str], None] = None,
) -> str:
    """Validate and trim a string.

    Args:
        value: Raw input.
        field: Field name reported in the error context.
        required: Reject an empty string after trimming.
        min_length: Minimum length after trimming.
        max_length: Maximum length after trimming.
        pattern: Regular expression the trimmed value must fully match.

    Returns:
        The trimmed string.

    Raises:
        ValidationError: On None, non-string input or a failed constraint.
    """
    if value is None:
        raise ValidationError(f"{field} is required", field=field)

    if not isinstance(value, str):
        raise ValidationError(
            f"{field} must be a string",
            field=field,
            context={"type": type(value).__name__},
        )

    text = sanitize_string_input(value)

    if required and not text:
        raise ValidationError(f"{field} is required and cannot be empty", field=field)

    if min_length is not None and len(text) < min_length:
        raise ValidationError(
            f"{field} must be at least {min_length} characters", field=field
        )

    if max_length is not None and len(text) > max_length:
        raise ValidationError(
            f"{field} must be at most {max_length} characters", field=field
        )

    if pattern is not None and not re.fullmatch(pattern, text):
        raise ValidationError(
            f"{field} does not match the required pattern",
            field=field,
            context={"pattern": getattr(pattern, "pattern", pattern)},
        )

    return text


def validate_range(value: Any, min_value: Any, max_value: Any, field: str = "value") -> float:
    """Check an inclusive ``[min_value, max_value]`` range.

    Raises:
        ValidationError: If any argument is not a finite number or the value
            lies outside the range.
    """
    number = validate_numeric_input(value, field=field)
    low = validate_numeric_input(min_value, field="min")
    high = validate_numeric_input(max_value, field="max")

    if number < low or number > high:
        raise ValidationError(
            f"Value {number} is out of range ({low} to {high})",
            field=field,
            context={"value": number, "min": low, "max": high},
        )

    return number


def validate_bounds(
    value: Any,
    min_value: Any = None,
    max_value: Any = None,
    field: str = "value",
) -> float:
    """Like validate_range, but either bound may be omitted."""
    if min_value is not None and max_value is not None:
        return validate_range(value, min_value, max_value, field=field)

    number = validate_numeric_input(value, field=field)

    if min_value is not None:
        low = validate_numeric_input(min_value, field="min")
        if number < low:
            raise ValidationError(
                f"Value {number} is below minimum {low}",
                field=field,
                context={"value": number, "min": low},
            )

    if max_value is not None:
        high = validate_numeric_input(max_value, field="max")
        if number > high:
            raise ValidationError(
                f"Value {number} is above maximum {high}",
                field=field,
                context={"value": number, "max": high},
            )

    return number
