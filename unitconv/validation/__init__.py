"""
Input validation for conversion requests.

Components:
- input_validator: generic numeric/string checks and sanitization
- category_validators: per-category request validation (length, weight,
  temperature) composed from the generic checks and the unit registry
"""

from unitconv.validation.input_validator import (
    sanitize_numeric_input,
    sanitize_string_input,
    validate_bounds,
    validate_numeric_input,
    validate_range,
    validate_string_input,
)
from unitconv.validation.category_validators import (
    CategoryValidator,
    LENGTH_VALIDATOR,
    TEMPERATURE_VALIDATOR,
    VALIDATORS,
    ValidatedRequest,
    WEIGHT_VALIDATOR,
    get_validator,
    validate_length,
    validate_temperature,
    validate_unit,
    validate_weight,
)

__all__ = [
    # Generic
    "sanitize_numeric_input",
    "sanitize_string_input",
    "validate_bounds",
    "validate_numeric_input",
    "validate_range",
    "validate_string_input",
    # Category
    "CategoryValidator",
    "LENGTH_VALIDATOR",
    "TEMPERATURE_VALIDATOR",
    "VALIDATORS",
    "ValidatedRequest",
    "WEIGHT_VALIDATOR",
    "get_validator",
    "validate_length",
    "validate_temperature",
    "validate_unit",
    "validate_weight",
]
