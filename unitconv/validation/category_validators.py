# -*- coding: utf-8 -*-
"""
Category Validators

Validate a complete conversion request for one category before any
arithmetic runs. The sequence is the same for every category:

1. Sanitize and numerically validate the value
2. Apply the category's plausible-range check
3. Check both units are trimmed, non-empty members of the category
4. Return the normalized request

Length and weight reject negative magnitudes. Temperature rejects values
below absolute zero expressed in the source unit, so its range check needs
the source unit resolved first.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, NamedTuple, Tuple, Union

from unitconv.data.conversion_factors import ABSOLUTE_ZERO
from unitconv.data.units import Category, belongs_to, category_of, units_of
from unitconv.exceptions import UnitError, ValidationError
from unitconv.validation.input_validator import (
    validate_numeric_input,
    validate_string_input,
)

logger = logging.getLogger(__name__)


class ValidatedRequest(NamedTuple):
    """Normalized conversion input, ready for a converter."""
    value: float
    from_unit: str
    to_unit: str


def validate_unit(unit: Any, category: Category, field: str = "unit") -> str:
    """
    Validate a unit symbol against a category.

    Args:
        unit: Raw unit symbol
        category: Category the unit must belong to
        field: Field name reported in errors ('from' or 'to')

    Returns:
        Trimmed unit symbol

    Raises:
        ValidationError: If the unit is missing, not a string or empty
        UnitError: If the unit is unknown or belongs to another category
    """
    symbol = validate_string_input(unit, field=field, required=True)

    if belongs_to(symbol, category):
        return symbol

    supported = ", ".join(sorted(units_of(category)))
    actual = category_of(symbol)
    if actual is None:
        message = (
            f"Unsupported {category.value} unit: '{symbol}'. "
            f"Supported units: {supported}"
        )
    else:
        message = (
            f"Unit '{symbol}' is a {actual.value} unit, not a {category.value} unit. "
            f"Supported units: {supported}"
        )
    raise UnitError(message, unit=symbol, category=category.value, context={"field": field})


def _reject_negative(category: Category) -> Callable[[float, Any], None]:
    def check(value: float, from_unit: Any) -> None:
        if value < 0:
            raise ValidationError(
                f"{category.value.capitalize()} cannot be negative: {value}",
                field="value",
                context={"value": value, "category": category.value},
            )
    return check


def _reject_below_absolute_zero(value: float, from_unit: Any) -> None:
    unit = validate_unit(from_unit, Category.TEMPERATURE, field="from")
    minimum = ABSOLUTE_ZERO[unit]
    if value < minimum:
        raise ValidationError(
            f"Temperature {value} {unit} is below absolute zero ({minimum} {unit})",
            field="value",
            context={"value": value, "unit": unit, "absolute_zero": minimum},
        )


@dataclass(frozen=True)
class CategoryValidator:
    """
    Request validator for a single category.

    Attributes:
        category: The category whose units are accepted
        range_check: Callable(value, from_unit) raising ValidationError
    """
    category: Category
    range_check: Callable[[float, Any], None]

    def validate_value(self, value: Any, from_unit: Any) -> float:
        """Steps 1 and 2: numeric well-formedness and plausible range."""
        number = validate_numeric_input(value, field="value")
        self.range_check(number, from_unit)
        return number

    def validate_units(self, from_unit: Any, to_unit: Any) -> Tuple[str, str]:
        """Step 3: both units must belong to the category."""
        return (
            validate_unit(from_unit, self.category, field="from"),
            validate_unit(to_unit, self.category, field="to"),
        )

    def validate(self, value: Any, from_unit: Any, to_unit: Any) -> ValidatedRequest:
        """
        Validate a full conversion request.

        Args:
            value: Number or numeric string
            from_unit: Source unit symbol
            to_unit: Target unit symbol

        Returns:
            ValidatedRequest with a float value and trimmed units

        Raises:
            ValidationError: Malformed or out-of-range value, malformed unit
            UnitError: Unsupported unit or unit from another category
        """
        number = self.validate_value(value, from_unit)
        source, target = self.validate_units(from_unit, to_unit)
        logger.debug(
            f"Validated {self.category.value} request: {number} {source} -> {target}"
        )
        return ValidatedRequest(number, source, target)


LENGTH_VALIDATOR = CategoryValidator(Category.LENGTH, _reject_negative(Category.LENGTH))
WEIGHT_VALIDATOR = CategoryValidator(Category.WEIGHT, _reject_negative(Category.WEIGHT))
TEMPERATURE_VALIDATOR = CategoryValidator(Category.TEMPERATURE, _reject_below_absolute_zero)

VALIDATORS: Mapping[Category, CategoryValidator] = MappingProxyType({
    Category.LENGTH: LENGTH_VALIDATOR,
    Category.WEIGHT: WEIGHT_VALIDATOR,
    Category.TEMPERATURE: TEMPERATURE_VALIDATOR,
})


def get_validator(category: Union[str, Category]) -> CategoryValidator:
    """Look up the validator for a category (UnitError if unknown)."""
    return VALIDATORS[Category.parse(category)]


def validate_length(value: Any, from_unit: Any, to_unit: Any) -> ValidatedRequest:
    return LENGTH_VALIDATOR.validate(value, from_unit, to_unit)


def validate_weight(value: Any, from_unit: Any, to_unit: Any) -> ValidatedRequest:
    return WEIGHT_VALIDATOR.validate(value, from_unit, to_unit)


def validate_temperature(value: Any, from_unit: Any, to_unit: Any) -> ValidatedRequest:
    return TEMPERATURE_VALIDATOR.validate(value, from_unit, to_unit)
