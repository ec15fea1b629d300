# -*- coding: utf-8 -*-
"""
Unit Registry

Enumerates the supported unit symbols per category and answers membership
queries. Symbols are case-sensitive and must match exactly.

Supports:
- Length: mm, cm, m, km, in, ft, yd, mi
- Weight: mg, g, kg, t, oz, lb, st, ton
- Temperature: c, f, k
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple, Union

from unitconv.exceptions import UnitError


class Category(str, Enum):
    """Unit category"""
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"

    @classmethod
    def parse(cls, raw: Union[str, "Category"]) -> "Category":
        """
        Resolve a category from its enum member or its name.

        Matching is case-insensitive and ignores surrounding whitespace.

        Raises:
            UnitError: If the category is unknown
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            key = raw.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        supported = ", ".join(member.value for member in cls)
        raise UnitError(
            f"Unknown unit category: {raw!r}. Supported categories: {supported}",
            category=str(raw),
        )


@dataclass(frozen=True)
class Unit:
    """A unit symbol and the category it belongs to."""
    symbol: str
    category: Category
    name: str


BASE_UNITS: Mapping[Category, str] = MappingProxyType({
    Category.LENGTH: "m",
    Category.WEIGHT: "kg",
    Category.TEMPERATURE: "k",
})

_UNIT_DEFINITIONS: Tuple[Unit, ...] = (
    # Length
    Unit("mm", Category.LENGTH, "millimeter"),
    Unit("cm", Category.LENGTH, "centimeter"),
    Unit("m", Category.LENGTH, "meter"),
    Unit("km", Category.LENGTH, "kilometer"),
    Unit("in", Category.LENGTH, "inch"),
    Unit("ft", Category.LENGTH, "foot"),
    Unit("yd", Category.LENGTH, "yard"),
    Unit("mi", Category.LENGTH, "mile"),
    # Weight
    Unit("mg", Category.WEIGHT, "milligram"),
    Unit("g", Category.WEIGHT, "gram"),
    Unit("kg", Category.WEIGHT, "kilogram"),
    Unit("t", Category.WEIGHT, "tonne"),
    Unit("oz", Category.WEIGHT, "ounce"),
    Unit("lb", Category.WEIGHT, "pound"),
    Unit("st", Category.WEIGHT, "stone"),
    Unit("ton", Category.WEIGHT, "ton"),
    # Temperature
    Unit("c", Category.TEMPERATURE, "Celsius"),
    Unit("f", Category.TEMPERATURE, "Fahrenheit"),
    Unit("k", Category.TEMPERATURE, "Kelvin"),
)


def _build_registry() -> Tuple[Mapping[str, Unit], Mapping[Category, FrozenSet[str]]]:
    by_symbol: Dict[str, Unit] = {}
    by_category: Dict[Category, set] = {category: set() for category in Category}
    for unit in _UNIT_DEFINITIONS:
        # Units are never shared across categories
        if unit.symbol in by_symbol:
            raise ValueError(f"Duplicate unit symbol: {unit.symbol}")
        by_symbol[unit.symbol] = unit
        by_category[unit.category].add(unit.symbol)
    return (
        MappingProxyType(by_symbol),
        MappingProxyType({cat: frozenset(symbols) for cat, symbols in by_category.items()}),
    )


UNITS, UNITS_BY_CATEGORY = _build_registry()


def units_of(category: Union[str, Category]) -> FrozenSet[str]:
    """
    Get the unit symbols of a category.

    Args:
        category: Category member or name ('length', 'weight', 'temperature')

    Returns:
        Frozen set of unit symbols, never empty

    Raises:
        UnitError: If the category is unknown
    """
    return UNITS_BY_CATEGORY[Category.parse(category)]


def belongs_to(unit: str, category: Union[str, Category]) -> bool:
    """
    Check if a unit symbol is a member of a category.

    Args:
        unit: Unit symbol (exact, case-sensitive)
        category: Category member or name

    Returns:
        True if the unit belongs to the category
    """
    return isinstance(unit, str) and unit in units_of(category)


def category_of(unit: str) -> Optional[Category]:
    """Reverse lookup; None for unknown symbols."""
    found = UNITS.get(unit) if isinstance(unit, str) else None
    return found.category if found else None


def get_unit(symbol: str) -> Unit:
    """
    Get the registered unit for a symbol.

    Raises:
        UnitError: If the symbol is not registered
    """
    found = UNITS.get(symbol) if isinstance(symbol, str) else None
    if found is None:
        raise UnitError(f"Unknown unit: {symbol!r}", unit=str(symbol))
    return found


def all_units(category: Union[str, Category, None] = None) -> Tuple[Unit, ...]:
    """
    List registered units in definition order.

    Args:
        category: Optional category filter

    Returns:
        Tuple of units
    """
    if category is None:
        return _UNIT_DEFINITIONS
    wanted = Category.parse(category)
    return tuple(unit for unit in _UNIT_DEFINITIONS if unit.category is wanted)
