"""Unit conversion and display formatting.

Every conversion scales through the SI base of its dimension: meters for
length, kilograms for mass and tons, square meters for area.
"""

import math
from typing import Callable, Mapping, NamedTuple

from tradecalc.exceptions import (
    InvalidUnitError,
    UnsupportedConversionError,
    assert_finite_number,
    assert_finite_result,
)
from tradecalc.fraction import (
    DEFAULT_DENOMINATOR,
    INCHES_PER_FOOT,
    format_feet_inches,
    format_inches_fraction,
)

from .table import SI_LABELS, UNITS, Dimension, Unit, parse_unit

DISPLAY_DECIMALS = 6


class ConversionResult(NamedTuple):
    """Converted value and the kind of conversion that produced it."""

    value: float
    kind: str


CONVERSION_KINDS: Mapping[tuple[Dimension, Dimension], str] = {
    (Dimension.LENGTH, Dimension.LENGTH): "length",
    (Dimension.MASS, Dimension.MASS): "mass",
    (Dimension.TON, Dimension.TON): "ton",
    (Dimension.MASS, Dimension.TON): "mass-ton",
    (Dimension.TON, Dimension.MASS): "ton-mass",
    (Dimension.AREA, Dimension.AREA): "area",
}


def _unit_of(unit: Unit | str, dimension: Dimension) -> Unit:
    parsed = parse_unit(unit)
    if UNITS[parsed].dimension is not dimension:
        raise InvalidUnitError(
            message=f"{parsed.value} is not a {dimension.value} unit",
            details={"unit": parsed.value, "expected": dimension.value},
        )
    return parsed


def _scale(value: float, unit: Unit | str, dimension: Dimension, inverse: bool = False) -> float:
    """Scale ``value`` to (or, with ``inverse``, from) the SI base of ``dimension``.

    Raises:
        InvalidUnitError: If ``unit`` does not belong to ``dimension``.
        InvalidParamError: If the scaled value overflows.
    """
    factor = UNITS[_unit_of(unit, dimension)].to_base
    scaled = value / factor if inverse else value * factor
    return assert_finite_result(scaled, "value")


def length_to_meters(value: float, unit: Unit | str) -> float:
    """Convert a length to meters."""
    return _scale(value, unit, Dimension.LENGTH)


def meters_to_length(value_m: float, unit: Unit | str) -> float:
    """Convert meters to the given length unit."""
    return _scale(value_m, unit, Dimension.LENGTH, inverse=True)


def mass_to_kg(value: float, unit: Unit | str) -> float:
    """Convert a mass to kilograms."""
    return _scale(value, unit, Dimension.MASS)


def kg_to_mass(value_kg: float, unit: Unit | str) -> float:
    """Convert kilograms to the given mass unit."""
    return _scale(value_kg, unit, Dimension.MASS, inverse=True)


def ton_to_kg(value: float, unit: Unit | str) -> float:
    """Convert short or metric tons to kilograms."""
    return _scale(value, unit, Dimension.TON)


def kg_to_ton(value_kg: float, unit: Unit | str) -> float:
    """Convert kilograms to short or metric tons."""
    return _scale(value_kg, unit, Dimension.TON, inverse=True)


def area_to_m2(value: float, unit: Unit | str) -> float:
    """Convert an area to square meters."""
    return _scale(value, unit, Dimension.AREA)


def m2_to_area(value_m2: float, unit: Unit | str) -> float:
    """Convert square meters to the given area unit."""
    return _scale(value_m2, unit, Dimension.AREA, inverse=True)


_TO_BASE: Mapping[Dimension, Callable[[float, Unit], float]] = {
    Dimension.LENGTH: length_to_meters,
    Dimension.MASS: mass_to_kg,
    Dimension.TON: ton_to_kg,
    Dimension.AREA: area_to_m2,
}

_FROM_BASE: Mapping[Dimension, Callable[[float, Unit], float]] = {
    Dimension.LENGTH: meters_to_length,
    Dimension.MASS: kg_to_mass,
    Dimension.TON: kg_to_ton,
    Dimension.AREA: m2_to_area,
}


def to_si(value: float, unit: Unit | str) -> tuple[float, str]:
    """Normalize a value to the SI base of its unit's dimension.

    Returns:
        Tuple of (value in SI base, SI unit label).
    """
    parsed = parse_unit(unit)
    dimension = UNITS[parsed].dimension
    return _TO_BASE[dimension](value, parsed), SI_LABELS[dimension]


def from_si(value_si: float, unit: Unit | str) -> float:
    """Convert a value in SI base units into ``unit``."""
    parsed = parse_unit(unit)
    return _FROM_BASE[UNITS[parsed].dimension](value_si, parsed)


def convert_unit(value: float, from_unit: Unit | str, to_unit: Unit | str) -> ConversionResult:
    """Convert a value between two units.

    Identity conversions return the input untouched. Mass and ton units
    bridge through kilograms; every other cross-dimension pair is rejected.

    Args:
        value: Finite value expressed in ``from_unit``.
        from_unit: Source unit.
        to_unit: Target unit.

    Returns:
        ConversionResult with the converted value and conversion kind.

    Raises:
        InvalidNumberError: If ``value`` is not finite.
        InvalidUnitError: If either unit is unknown.
        UnsupportedConversionError: If the dimensions are not compatible.
        InvalidParamError: If the converted value overflows.
    """
    value = assert_finite_number(value, "value")
    source = parse_unit(from_unit)
    target = parse_unit(to_unit)
    if source is target:
        return ConversionResult(value, "identity")

    kind = CONVERSION_KINDS.get((UNITS[source].dimension, UNITS[target].dimension))
    if kind is None:
        raise UnsupportedConversionError(source.value, target.value)

    value_si, _ = to_si(value, source)
    return ConversionResult(from_si(value_si, target), kind)


def format_value(value: float, unit: Unit | str, precision_denom: int = DEFAULT_DENOMINATOR) -> str:
    """Render a value in ``unit`` for display.

    Feet render as ``F' I"`` and inches as a mixed fraction, both rounded to
    ``1/precision_denom`` inch. Other units use six decimals and the unit
    token.

    Example:
        >>> format_value(1.5, "ft", 16)
        '1\\' 6"'
    """
    parsed = parse_unit(unit)
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if parsed is Unit.IN:
        return format_inches_fraction(value, precision_denom)
    if parsed is Unit.FT:
        return format_feet_inches(
            assert_finite_result(value * INCHES_PER_FOOT, "value"), precision_denom
        )
    return f"{value:.{DISPLAY_DECIMALS}f} {parsed.value}"
