# -*- coding: utf-8 -*-
"""
Conversion Service

Single entry point for callers: validate the request for its category (fail
fast), then run the category's converter on the normalized input. Errors
are always one of the typed engine exceptions and are re-raised unchanged.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from unitconv.calculation.models import ConversionInput, ConversionRequest, ConversionResult
from unitconv.calculation.unit_converter import get_converter
from unitconv.data.units import Category, UNITS_BY_CATEGORY, category_of
from unitconv.exceptions import UnitConvException, is_client_error
from unitconv.validation.category_validators import ValidatedRequest, get_validator

logger = logging.getLogger(__name__)


def _run(category: Category, value: Any, from_unit: Any, to_unit: Any) -> Tuple[float, ValidatedRequest]:
    try:
        validated = get_validator(category).validate(value, from_unit, to_unit)
        result = get_converter(category)(*validated)
    except UnitConvException as e:
        if is_client_error(e):
            logger.info(f"Rejected {category.value} conversion: {e}")
        else:
            logger.error(f"{category.value} conversion failed: {e}")
        raise

    logger.debug(
        f"Converted {validated.value} {validated.from_unit} -> "
        f"{result} {validated.to_unit} ({category.value})"
    )
    return result, validated


def convert(
    category: Union[str, Category],
    value: Any,
    from_unit: Any,
    to_unit: Any,
) -> float:
    """
    Convert a value between two units of the same category.

    Args:
        category: 'length', 'weight', 'temperature' or a Category member
        value: Number or numeric string
        from_unit: Source unit symbol (e.g. 'mi')
        to_unit: Target unit symbol (e.g. 'km')

    Returns:
        Converted value

    Raises:
        ValidationError: Malformed or physically impossible value
        UnitError: Unknown category, unknown unit or cross-category unit
        ConversionError: Arithmetic produced no finite result
    """
    result, _ = _run(Category.parse(category), value, from_unit, to_unit)
    return result


def convert_length(value: Any, from_unit: Any, to_unit: Any) -> float:
    return convert(Category.LENGTH, value, from_unit, to_unit)


def convert_weight(value: Any, from_unit: Any, to_unit: Any) -> float:
    return convert(Category.WEIGHT, value, from_unit, to_unit)


def convert_temperature(value: Any, from_unit: Any, to_unit: Any) -> float:
    return convert(Category.TEMPERATURE, value, from_unit, to_unit)


def convert_request(request: ConversionRequest) -> ConversionResult:
    """
    Convert a request model and echo its normalized input.

    Returns:
        ConversionResult with the converted value and validated input
    """
    category = Category.parse(request.category)
    result, validated = _run(category, request.value, request.from_unit, request.to_unit)
    return ConversionResult(
        result=result,
        input=ConversionInput(
            value=validated.value,
            from_unit=validated.from_unit,
            to_unit=validated.to_unit,
        ),
        category=category,
    )


def is_compatible(unit1: str, unit2: str) -> bool:
    """
    Check if two units can be converted into each other (same category).

    Args:
        unit1: First unit
        unit2: Second unit

    Returns:
        True if compatible, False otherwise
    """
    category1 = category_of(unit1)
    return category1 is not None and category1 == category_of(unit2)


def list_supported_units(category: Optional[Union[str, Category]] = None) -> Dict[str, List[str]]:
    """
    List all supported units.

    Args:
        category: Optional category filter ('length', 'weight', 'temperature')

    Returns:
        Dictionary mapping category names to sorted unit lists
    """
    if category is not None:
        wanted = Category.parse(category)
        return {wanted.value: sorted(UNITS_BY_CATEGORY[wanted])}

    return {cat.value: sorted(units) for cat, units in UNITS_BY_CATEGORY.items()}
