"""
unitconv: Unit Conversion Engine
================================

Deterministic conversions between units of length, weight and temperature,
with layered input validation and a typed error hierarchy.

    >>> import unitconv
    >>> unitconv.convert("length", 1, "m", "cm")
    100.0
"""

from ._version import __version__

from unitconv.exceptions import (
    ApplicationError,
    ConversionError,
    UnitConvException,
    UnitError,
    ValidationError,
)
from unitconv.data import Category, Unit, belongs_to, units_of
from unitconv.calculation import (
    ConversionRequest,
    ConversionResult,
    convert,
    convert_length,
    convert_request,
    convert_temperature,
    convert_weight,
)

__all__ = [
    "__version__",
    # Errors
    "ApplicationError",
    "ConversionError",
    "UnitConvException",
    "UnitError",
    "ValidationError",
    # Registry
    "Category",
    "Unit",
    "belongs_to",
    "units_of",
    # Conversion
    "ConversionRequest",
    "ConversionResult",
    "convert",
    "convert_length",
    "convert_request",
    "convert_temperature",
    "convert_weight",
]
