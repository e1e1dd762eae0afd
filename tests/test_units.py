"""Unit tests for the unit table, converters and display formatting."""

import pytest

from tradecalc.exceptions import (
    InvalidNumberError,
    InvalidParamError,
    InvalidUnitError,
    UnsupportedConversionError,
)
from tradecalc.units import (
    Dimension,
    Unit,
    area_to_m2,
    convert_unit,
    format_value,
    from_si,
    is_area_unit,
    is_length_unit,
    is_mass_unit,
    is_ton_unit,
    kg_to_mass,
    kg_to_ton,
    length_to_meters,
    m2_to_area,
    mass_to_kg,
    meters_to_length,
    parse_unit,
    si_label,
    to_si,
    ton_to_kg,
    unit_dimension,
)

LENGTH_UNITS = [Unit.M, Unit.CM, Unit.MM, Unit.IN, Unit.FT, Unit.YD]


class TestClassification:
    """Tests for unit parsing and dimension predicates."""

    def test_predicates(self):
        """Test one representative unit per dimension."""
        assert is_length_unit("ft")
        assert is_mass_unit("kg")
        assert is_ton_unit("metric_ton")
        assert is_area_unit("acre")

    def test_predicates_partition_units(self):
        """Test that every unit belongs to exactly one group."""
        predicates = (is_length_unit, is_mass_unit, is_ton_unit, is_area_unit)
        for unit in Unit:
            assert sum(predicate(unit) for predicate in predicates) == 1

    def test_predicates_false_for_unknown_unit(self):
        """Test that unknown tokens are in no group."""
        assert not is_length_unit("furlong")

    def test_parse_unit_aliases(self):
        """Test alias resolution."""
        assert parse_unit("lbs") is Unit.LB
        assert parse_unit("ft") is Unit.FT
        assert parse_unit(Unit.ACRE) is Unit.ACRE

    def test_parse_unit_rejects_unknown(self):
        """Test that unknown tokens raise INVALID_UNIT."""
        with pytest.raises(InvalidUnitError) as exc_info:
            parse_unit("furlong")

        assert exc_info.value.error_code == "INVALID_UNIT"

    def test_dimensions_and_si_labels(self):
        """Test the SI label attached to each dimension."""
        assert unit_dimension("yd") is Dimension.LENGTH
        assert si_label("ft") == "m"
        assert si_label("lb") == "kg"
        assert si_label("ton") == "kg"
        assert si_label("acre") == "m2"


class TestLinearConverters:
    """Tests for per-dimension converters."""

    def test_length_to_meters(self):
        """Test every length unit against its factor."""
        assert length_to_meters(12, "in") == pytest.approx(0.3048, abs=1e-12)
        assert length_to_meters(1, "ft") == pytest.approx(0.3048, abs=1e-12)
        assert length_to_meters(1, "yd") == pytest.approx(0.9144, abs=1e-12)
        assert length_to_meters(100, "cm") == pytest.approx(1, abs=1e-12)
        assert length_to_meters(1000, "mm") == pytest.approx(1, abs=1e-12)
        assert length_to_meters(2.5, "m") == 2.5

    def test_meters_to_length(self):
        """Test the reverse direction."""
        assert meters_to_length(1, "cm") == pytest.approx(100, abs=1e-12)
        assert meters_to_length(1, "mm") == pytest.approx(1000, abs=1e-12)
        assert meters_to_length(0.3048, "ft") == pytest.approx(1, abs=1e-12)

    @pytest.mark.parametrize("unit", LENGTH_UNITS)
    @pytest.mark.parametrize("value", [0.0, 1.0, -3.25, 1234.5678])
    def test_length_round_trip(self, unit, value):
        """Test that meters and back returns the input."""
        assert meters_to_length(length_to_meters(value, unit), unit) == pytest.approx(value, abs=1e-9)

    def test_mass(self):
        """Test pound/kilogram scaling."""
        kg = mass_to_kg(1, "lb")

        assert kg == pytest.approx(0.45359237, abs=1e-12)
        assert kg_to_mass(kg, "lbs") == pytest.approx(1, abs=1e-12)

    def test_tons(self):
        """Test short and metric tons."""
        assert ton_to_kg(1, "ton") == pytest.approx(907.18474)
        assert ton_to_kg(1, "metric_ton") == 1000
        assert kg_to_ton(ton_to_kg(1, "ton"), "ton") == pytest.approx(1, abs=1e-12)

    def test_area(self):
        """Test acre and square-foot scaling."""
        m2 = area_to_m2(1, "acre")

        assert m2 == pytest.approx(4046.8564224, abs=1e-8)
        assert m2_to_area(m2, "acre") == pytest.approx(1, abs=1e-8)
        assert m2_to_area(m2, "ft2") == pytest.approx(43560, rel=1e-9)

    def test_wrong_dimension_rejected(self):
        """Test that converters refuse units of another dimension."""
        with pytest.raises(InvalidUnitError):
            mass_to_kg(1, "ft")
        with pytest.raises(InvalidUnitError):
            length_to_meters(1, "acre")

    def test_overflow_rejected(self):
        """Test that scaling a finite value past float range raises INVALID_PARAM."""
        with pytest.raises(InvalidParamError) as exc_info:
            meters_to_length(1e308, "mm")

        assert exc_info.value.error_code == "INVALID_PARAM"
        with pytest.raises(InvalidParamError):
            area_to_m2(1e308, "acre")

    def test_to_and_from_si(self):
        """Test the generic SI helpers."""
        assert to_si(2, "ft") == (pytest.approx(0.6096), "m")
        assert to_si(1, "metric_ton") == (1000, "kg")
        assert from_si(1000, "metric_ton") == 1


class TestConvertUnit:
    """Tests for the cross-dimension conversion dispatcher."""

    @pytest.mark.parametrize("unit", list(Unit))
    def test_identity(self, unit):
        """Test that same-unit conversion short-circuits."""
        assert convert_unit(1.1, unit, unit) == (1.1, "identity")

    def test_length(self):
        """Test a length conversion."""
        result = convert_unit(1, "ft", "in")

        assert result.value == pytest.approx(12, abs=1e-12)
        assert result.kind == "length"

    def test_mass(self):
        """Test a mass conversion."""
        assert convert_unit(1, "kg", "lb").value == pytest.approx(2.2046, abs=1e-3)

    def test_mass_ton_bridge(self):
        """Test mass and ton bridging through kilograms."""
        to_ton = convert_unit(1, "kg", "metric_ton")
        to_kg = convert_unit(1, "metric_ton", "kg")

        assert to_ton == (pytest.approx(0.001, abs=1e-12), "mass-ton")
        assert to_kg == (pytest.approx(1000, abs=1e-9), "ton-mass")

    def test_ton_to_ton(self):
        """Test short to metric tons."""
        result = convert_unit(1, "ton", "metric_ton")

        assert result.value == pytest.approx(0.90718474)
        assert result.kind == "ton"

    def test_area(self):
        """Test an area conversion."""
        result = convert_unit(1, "acre", "ft2")

        assert result.value == pytest.approx(43560, rel=1e-9)
        assert result.kind == "area"

    @pytest.mark.parametrize("pair", [("ft", "kg"), ("acre", "m"), ("lb", "ft2")])
    def test_incompatible_dimensions(self, pair):
        """Test that unbridged dimensions raise UNSUPPORTED_CONVERSION."""
        with pytest.raises(UnsupportedConversionError) as exc_info:
            convert_unit(1, *pair)

        assert exc_info.value.error_code == "UNSUPPORTED_CONVERSION"
        assert exc_info.value.details == {"from": pair[0], "to": pair[1]}

    def test_unknown_unit(self):
        """Test that unknown units raise INVALID_UNIT."""
        with pytest.raises(InvalidUnitError):
            convert_unit(1, "ft", "furlong")

    def test_overflowing_result(self):
        """Test that a finite input whose conversion overflows is rejected."""
        with pytest.raises(InvalidParamError):
            convert_unit(1e308, "m", "mm")

    def test_non_finite_value(self):
        """Test that NaN is rejected."""
        with pytest.raises(InvalidNumberError):
            convert_unit(float("nan"), "ft", "in")


class TestFormatValue:
    """Tests for display formatting."""

    def test_inches(self):
        """Test inch rendering."""
        assert format_value(12, "in", 16) == '12"'
        assert format_value(0.5, "in", 16) == '1/2"'

    def test_feet(self):
        """Test feet-inch rendering."""
        assert format_value(1.5, "ft", 16) == "1' 6\""
        assert format_value(-1.5, "ft", 16) == "-1' 6\""

    def test_precision_controls_rounding(self):
        """Test that the denominator sets the granularity."""
        assert format_value(0.3, "in", 4) == '1/4"'
        assert format_value(0.3, "in", 8) == '1/4"'
        assert format_value(0.3, "in", 16) == '5/16"'

    def test_other_units_six_decimals(self):
        """Test decimal rendering for everything but feet and inches."""
        assert format_value(2.20462262185, "lb", 16) == "2.204623 lb"
        assert format_value(1, "m", 16) == "1.000000 m"
        assert format_value(0.25, "metric_ton", 16) == "0.250000 metric_ton"

    def test_non_finite(self):
        """Test that non-finite values render as-is."""
        assert format_value(float("nan"), "m", 16) == "nan"

    @pytest.mark.parametrize("unit", ["ft", "in"])
    def test_overflowing_display(self, unit):
        """Test that fraction displays refuse values too large to quantize."""
        with pytest.raises(InvalidParamError):
            format_value(1e308, unit, 16)
