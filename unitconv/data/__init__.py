"""
Static unit data: the unit registry and the conversion factor table.

Both are built once at import and never mutated.
"""

from unitconv.data.units import (
    BASE_UNITS,
    Category,
    Unit,
    UNITS,
    UNITS_BY_CATEGORY,
    all_units,
    belongs_to,
    category_of,
    get_unit,
    units_of,
)
from unitconv.data.conversion_factors import (
    ABSOLUTE_ZERO,
    FROM_KELVIN,
    LENGTH_TO_METERS,
    LINEAR_FACTORS,
    TO_KELVIN,
    WEIGHT_TO_KILOGRAMS,
    verify_factor_table,
)

__all__ = [
    # Registry
    "BASE_UNITS",
    "Category",
    "Unit",
    "UNITS",
    "UNITS_BY_CATEGORY",
    "all_units",
    "belongs_to",
    "category_of",
    "get_unit",
    "units_of",
    # Factors
    "ABSOLUTE_ZERO",
    "FROM_KELVIN",
    "LENGTH_TO_METERS",
    "LINEAR_FACTORS",
    "TO_KELVIN",
    "WEIGHT_TO_KILOGRAMS",
    "verify_factor_table",
]
