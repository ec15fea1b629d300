# -*- coding: utf-8 -*-
"""
Unit Conversion Engine

All conversions are deterministic arithmetic over the static factor table.
Fail loudly on unknown units; never fall back to a default unit or value.

Supports:
- Length: mm, cm, m, km, in, ft, yd, mi (base: meter)
- Weight: mg, g, kg, t, oz, lb, st, ton (base: kilogram)
- Temperature: c, f, k (base: Kelvin)
"""

import math
from types import MappingProxyType
from typing import Callable, Mapping, Union

from unitconv.data.conversion_factors import FROM_KELVIN, LINEAR_FACTORS, TO_KELVIN
from unitconv.data.units import Category, category_of
from unitconv.exceptions import ConversionError, UnitError

Converter = Callable[[float, str, str], float]


def _unknown_unit(unit: str, category: Category) -> UnitError:
    actual = category_of(unit)
    if actual is None:
        message = f"Missing conversion factor for {category.value} unit {unit!r}"
    else:
        message = f"Unit {unit!r} is a {actual.value} unit, not a {category.value} unit"
    return UnitError(message, unit=str(unit), category=category.value)


def _checked(result: float, value: float, from_unit: str, to_unit: str) -> float:
    if not math.isfinite(result):
        raise ConversionError(
            f"Conversion of {value} {from_unit} to {to_unit} has no finite result",
            context={"value": value, "from": from_unit, "to": to_unit, "result": str(result)},
        )
    return result


def convert_linear(value: float, from_unit: str, to_unit: str, category: Category) -> float:
    """
    Convert through the category's base unit.

    result = value * factor(from_unit) / factor(to_unit)

    Args:
        value: Numerical value to convert
        from_unit: Source unit symbol
        to_unit: Target unit symbol
        category: LENGTH or WEIGHT

    Returns:
        Converted value

    Raises:
        UnitError: If either unit has no factor in the category
        ConversionError: If the category is not linear or the result overflows
    """
    table = LINEAR_FACTORS.get(category)
    if table is None:
        raise ConversionError(
            f"{category.value} is not a linear unit category",
            context={"category": category.value},
        )

    # Defensive re-check; validators should already have rejected these
    if from_unit not in table:
        raise _unknown_unit(from_unit, category)
    if to_unit not in table:
        raise _unknown_unit(to_unit, category)

    result = value * table[from_unit] / table[to_unit]
    return _checked(result, value, from_unit, to_unit)


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a length, e.g. convert_length(1, 'mi', 'km') -> 1.609344"""
    return convert_linear(value, from_unit, to_unit, Category.LENGTH)


def convert_weight(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a mass, e.g. convert_weight(1, 'kg', 'g') -> 1000.0"""
    return convert_linear(value, from_unit, to_unit, Category.WEIGHT)


def to_kelvin(value: float, unit: str) -> float:
    """Convert a temperature in ``unit`` to Kelvin."""
    formula = TO_KELVIN.get(unit)
    if formula is None:
        raise _unknown_unit(unit, Category.TEMPERATURE)
    return formula(value)


def from_kelvin(kelvin: float, unit: str) -> float:
    """Convert a temperature in Kelvin to ``unit``."""
    formula = FROM_KELVIN.get(unit)
    if formula is None:
        raise _unknown_unit(unit, Category.TEMPERATURE)
    return formula(kelvin)


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a temperature through Kelvin.

    Each unit has exactly one to-Kelvin and one from-Kelvin formula, so the
    two legs for the same unit are exact inverses up to float rounding.

    Examples:
        >>> convert_temperature(0, 'c', 'f')
        32.0
        >>> convert_temperature(0, 'c', 'k')
        273.15

    Raises:
        UnitError: If either unit is not a temperature unit
    """
    # Resolve both units before computing anything
    if to_unit not in FROM_KELVIN:
        raise _unknown_unit(to_unit, Category.TEMPERATURE)
    kelvin = to_kelvin(value, from_unit)
    result = from_kelvin(kelvin, to_unit)
    return _checked(result, value, from_unit, to_unit)


CONVERTERS: Mapping[Category, Converter] = MappingProxyType({
    Category.LENGTH: convert_length,
    Category.WEIGHT: convert_weight,
    Category.TEMPERATURE: convert_temperature,
})


def get_converter(category: Union[str, Category]) -> Converter:
    """Look up the converter for a category (UnitError if unknown)."""
    return CONVERTERS[Category.parse(category)]
