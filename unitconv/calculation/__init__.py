"""
Unit Conversion Calculation Engine

Deterministic conversions between units of length, weight and temperature.

Components:
- unit_converter: pure linear and affine converters over the factor table
- conversion_service: validate-then-convert entry points
- models: request/result models for callers that exchange JSON
"""

from unitconv.calculation.unit_converter import (
    CONVERTERS,
    convert_linear,
    from_kelvin,
    get_converter,
    to_kelvin,
)
from unitconv.calculation.models import (
    ConversionInput,
    ConversionRequest,
    ConversionResult,
)
from unitconv.calculation.conversion_service import (
    convert,
    convert_length,
    convert_request,
    convert_temperature,
    convert_weight,
    is_compatible,
    list_supported_units,
)

__all__ = [
    # Service
    "convert",
    "convert_length",
    "convert_request",
    "convert_temperature",
    "convert_weight",
    "is_compatible",
    "list_supported_units",
    # Converters (no validation)
    "CONVERTERS",
    "convert_linear",
    "from_kelvin",
    "get_converter",
    "to_kelvin",
    # Models
    "ConversionInput",
    "ConversionRequest",
    "ConversionResult",
]
