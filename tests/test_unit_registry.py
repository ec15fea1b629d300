"""
Unit Registry and Conversion Factor Table Tests

Validates:
- Category parsing and unit membership queries
- Exact, case-sensitive symbol matching
- Factor table integrity against the registry
"""

import math

import pytest

from unitconv.data import (
    ABSOLUTE_ZERO,
    BASE_UNITS,
    Category,
    FROM_KELVIN,
    LENGTH_TO_METERS,
    LINEAR_FACTORS,
    TO_KELVIN,
    UNITS,
    WEIGHT_TO_KILOGRAMS,
    all_units,
    belongs_to,
    category_of,
    get_unit,
    units_of,
    verify_factor_table,
)
from unitconv.data import conversion_factors
from unitconv.exceptions import ApplicationError, UnitError


# ==================== CATEGORY ====================

class TestCategory:
    """Category enum parsing"""

    @pytest.mark.parametrize("raw", ["length", "LENGTH", "  Length "])
    def test_parse_names(self, raw):
        assert Category.parse(raw) is Category.LENGTH

    def test_parse_member(self):
        assert Category.parse(Category.WEIGHT) is Category.WEIGHT

    @pytest.mark.parametrize("raw", ["volume", "", None, 3])
    def test_parse_unknown_raises_unit_error(self, raw):
        with pytest.raises(UnitError) as exc_info:
            Category.parse(raw)

        assert "Supported categories" in exc_info.value.message


# ==================== REGISTRY ====================

class TestUnitRegistry:
    """Membership queries"""

    def test_units_of_each_category(self):
        assert units_of("length") == {"mm", "cm", "m", "km", "in", "ft", "yd", "mi"}
        assert units_of("weight") == {"mg", "g", "kg", "t", "oz", "lb", "st", "ton"}
        assert units_of(Category.TEMPERATURE) == {"c", "f", "k"}

    def test_units_of_is_immutable(self):
        assert isinstance(units_of("length"), frozenset)

    def test_units_of_unknown_category(self):
        with pytest.raises(UnitError):
            units_of("volume")

    def test_belongs_to(self):
        assert belongs_to("kg", "weight")
        assert not belongs_to("kg", "length")
        assert not belongs_to("xx", "length")

    def test_belongs_to_is_case_sensitive(self):
        """Symbols must match exactly; no case folding."""
        assert not belongs_to("KG", "weight")
        assert not belongs_to("C", "temperature")

    def test_belongs_to_does_not_trim(self):
        assert not belongs_to(" m", "length")

    def test_belongs_to_non_string(self):
        assert not belongs_to(None, "length")

    def test_units_are_never_shared_across_categories(self):
        seen = set()
        for category in Category:
            symbols = units_of(category)
            assert not symbols & seen
            seen |= symbols
        assert seen == set(UNITS)

    def test_category_of(self):
        assert category_of("mi") is Category.LENGTH
        assert category_of("st") is Category.WEIGHT
        assert category_of("k") is Category.TEMPERATURE
        assert category_of("xx") is None

    def test_get_unit(self):
        unit = get_unit("lb")

        assert unit.symbol == "lb"
        assert unit.category is Category.WEIGHT
        assert unit.name == "pound"

    def test_get_unit_unknown(self):
        with pytest.raises(UnitError) as exc_info:
            get_unit("parsec")

        assert exc_info.value.context["unit"] == "parsec"

    def test_units_are_frozen(self):
        with pytest.raises(AttributeError):
            get_unit("m").symbol = "meter"

    def test_all_units_filter(self):
        symbols = [unit.symbol for unit in all_units("temperature")]

        assert symbols == ["c", "f", "k"]
        assert len(all_units()) == 19

    def test_base_units(self):
        assert BASE_UNITS[Category.LENGTH] == "m"
        assert BASE_UNITS[Category.WEIGHT] == "kg"
        assert BASE_UNITS[Category.TEMPERATURE] == "k"


# ==================== FACTOR TABLE ====================

class TestConversionFactors:
    """Factor table integrity"""

    def test_every_linear_unit_has_one_positive_factor(self):
        for category, table in LINEAR_FACTORS.items():
            assert set(table) == units_of(category)
            for factor in table.values():
                assert math.isfinite(factor) and factor > 0

    def test_base_units_have_factor_one(self):
        assert LENGTH_TO_METERS["m"] == 1.0
        assert WEIGHT_TO_KILOGRAMS["kg"] == 1.0

    def test_known_factors(self):
        assert LENGTH_TO_METERS["mi"] == 1609.344
        assert LENGTH_TO_METERS["in"] == 0.0254
        assert WEIGHT_TO_KILOGRAMS["lb"] == 0.45359237
        assert WEIGHT_TO_KILOGRAMS["st"] == pytest.approx(14 * WEIGHT_TO_KILOGRAMS["lb"])

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            LENGTH_TO_METERS["m"] = 2.0

    def test_temperature_formulas_cover_all_units(self):
        assert set(TO_KELVIN) == set(FROM_KELVIN) == units_of("temperature")
        assert set(ABSOLUTE_ZERO) == units_of("temperature")

    def test_absolute_zero_maps_to_zero_kelvin(self):
        for unit, minimum in ABSOLUTE_ZERO.items():
            assert TO_KELVIN[unit](minimum) == pytest.approx(0.0, abs=1e-9)

    def test_verify_factor_table_passes(self):
        verify_factor_table()

    def test_verify_factor_table_detects_bad_factor(self, monkeypatch):
        """A non-positive factor is a startup misconfiguration."""
        broken = dict(LENGTH_TO_METERS, cm=0.0)
        monkeypatch.setattr(
            conversion_factors,
            "LINEAR_FACTORS",
            {Category.LENGTH: broken, Category.WEIGHT: WEIGHT_TO_KILOGRAMS},
        )

        with pytest.raises(ApplicationError) as exc_info:
            verify_factor_table()

        assert exc_info.value.code == "FACTOR_TABLE_MISCONFIGURED"
        assert any("cm" in problem for problem in exc_info.value.context["problems"])

    def test_verify_factor_table_detects_missing_factor(self, monkeypatch):
        partial = {k: v for k, v in WEIGHT_TO_KILOGRAMS.items() if k != "oz"}
        monkeypatch.setattr(
            conversion_factors,
            "LINEAR_FACTORS",
            {Category.LENGTH: LENGTH_TO_METERS, Category.WEIGHT: partial},
        )

        with pytest.raises(ApplicationError) as exc_info:
            verify_factor_table()

        assert "missing factors" in exc_info.value.context["problems"][0]
