# -*- coding: utf-8 -*-
"""
Conversion Factor Table

Linear units (length, weight) map to "base units per one unit":
- Length: meters
- Weight: kilograms

Temperature is affine and has no factor record. Each unit instead has a
to-Kelvin and a from-Kelvin formula; together they are the temperature data.
"""

import math
from types import MappingProxyType
from typing import Callable, Mapping

from unitconv.data.units import Category, UNITS_BY_CATEGORY
from unitconv.exceptions import ApplicationError

KELVIN_OFFSET = 273.15
FAHRENHEIT_OFFSET = 32.0
FAHRENHEIT_SCALE = 9.0 / 5.0

# Absolute zero expressed in each temperature unit
ABSOLUTE_ZERO: Mapping[str, float] = MappingProxyType({
    "c": -KELVIN_OFFSET,
    "f": -459.67,
    "k": 0.0,
})

LENGTH_TO_METERS: Mapping[str, float] = MappingProxyType({
    "mm": 0.001,
    "cm": 0.01,
    "m": 1.0,
    "km": 1000.0,
    "in": 0.0254,
    "ft": 0.3048,
    "yd": 0.9144,
    "mi": 1609.344,  # international mile
})

WEIGHT_TO_KILOGRAMS: Mapping[str, float] = MappingProxyType({
    "mg": 0.000001,
    "g": 0.001,
    "kg": 1.0,
    "t": 1000.0,
    "oz": 0.028349523125,  # avoirdupois ounce
    "lb": 0.45359237,  # avoirdupois pound
    "st": 6.35029318,  # 14 lb
    "ton": 1000.0,  # metric ton, same as t
})

LINEAR_FACTORS: Mapping[Category, Mapping[str, float]] = MappingProxyType({
    Category.LENGTH: LENGTH_TO_METERS,
    Category.WEIGHT: WEIGHT_TO_KILOGRAMS,
})


TO_KELVIN: Mapping[str, Callable[[float], float]] = MappingProxyType({
    "c": lambda value: value + KELVIN_OFFSET,
    "f": lambda value: (value - FAHRENHEIT_OFFSET) * 5.0 / 9.0 + KELVIN_OFFSET,
    "k": lambda value: value,
})

FROM_KELVIN: Mapping[str, Callable[[float], float]] = MappingProxyType({
    "c": lambda kelvin: kelvin - KELVIN_OFFSET,
    "f": lambda kelvin: (kelvin - KELVIN_OFFSET) * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET,
    "k": lambda kelvin: kelvin,
})


def verify_factor_table() -> None:
    """
    Check the tables against the unit registry.

    Every linear unit needs exactly one positive finite factor, and every
    temperature unit needs both formulas.

    Raises:
        ApplicationError: If the tables are misconfigured
    """
    problems = []

    for category, table in LINEAR_FACTORS.items():
        registered = UNITS_BY_CATEGORY[category]
        missing = sorted(registered - set(table))
        extra = sorted(set(table) - registered)
        if missing:
            problems.append(f"{category.value}: missing factors for {missing}")
        if extra:
            problems.append(f"{category.value}: factors for unregistered units {extra}")
        for unit, factor in table.items():
            if not math.isfinite(factor) or factor <= 0:
                problems.append(f"{category.value}: invalid factor {factor!r} for {unit}")

    temperature_units = UNITS_BY_CATEGORY[Category.TEMPERATURE]
    for name, formulas in (("to_kelvin", TO_KELVIN), ("from_kelvin", FROM_KELVIN)):
        if set(formulas) != temperature_units:
            problems.append(
                f"temperature: {name} formulas {sorted(formulas)} "
                f"do not match units {sorted(temperature_units)}"
            )

    if set(ABSOLUTE_ZERO) != temperature_units:
        problems.append("temperature: absolute zero table does not match units")

    if problems:
        raise ApplicationError(
            "Conversion factor table is misconfigured",
            code="FACTOR_TABLE_MISCONFIGURED",
            context={"problems": problems},
        )


verify_factor_table()
