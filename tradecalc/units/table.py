"""Static unit table and dimension classification."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from tradecalc.exceptions import InvalidUnitError


class Unit(str, Enum):
    """Supported measurement units."""

    M = "m"
    CM = "cm"
    MM = "mm"
    IN = "in"
    FT = "ft"
    YD = "yd"
    KG = "kg"
    LB = "lb"
    TON = "ton"
    METRIC_TON = "metric_ton"
    M2 = "m2"
    FT2 = "ft2"
    ACRE = "acre"


class Dimension(str, Enum):
    """Measurement categories whose units convert by linear scaling."""

    LENGTH = "length"
    MASS = "mass"
    TON = "ton"
    AREA = "area"


@dataclass(frozen=True)
class UnitDef:
    """Defines a unit's dimension and its factor to the SI base."""

    dimension: Dimension
    to_base: float


INCH_TO_M = 0.0254
FOOT_TO_M = 0.3048
YARD_TO_M = 0.9144
LB_TO_KG = 0.45359237
SHORT_TON_TO_KG = 907.18474
METRIC_TON_TO_KG = 1000.0
SQFT_TO_M2 = 0.09290304
ACRE_TO_M2 = 4046.8564224

UNITS: Mapping[Unit, UnitDef] = MappingProxyType({
    Unit.M: UnitDef(Dimension.LENGTH, 1.0),
    Unit.CM: UnitDef(Dimension.LENGTH, 0.01),
    Unit.MM: UnitDef(Dimension.LENGTH, 0.001),
    Unit.IN: UnitDef(Dimension.LENGTH, INCH_TO_M),
    Unit.FT: UnitDef(Dimension.LENGTH, FOOT_TO_M),
    Unit.YD: UnitDef(Dimension.LENGTH, YARD_TO_M),
    Unit.KG: UnitDef(Dimension.MASS, 1.0),
    Unit.LB: UnitDef(Dimension.MASS, LB_TO_KG),
    Unit.TON: UnitDef(Dimension.TON, SHORT_TON_TO_KG),
    Unit.METRIC_TON: UnitDef(Dimension.TON, METRIC_TON_TO_KG),
    Unit.M2: UnitDef(Dimension.AREA, 1.0),
    Unit.FT2: UnitDef(Dimension.AREA, SQFT_TO_M2),
    Unit.ACRE: UnitDef(Dimension.AREA, ACRE_TO_M2),
})

# Mass and ton share the kilogram base so they can bridge.
SI_LABELS: Mapping[Dimension, str] = MappingProxyType({
    Dimension.LENGTH: "m",
    Dimension.MASS: "kg",
    Dimension.TON: "kg",
    Dimension.AREA: "m2",
})

UNIT_ALIASES: Mapping[str, Unit] = MappingProxyType({
    "lbs": Unit.LB,
    "sqft": Unit.FT2,
})


def parse_unit(token: Any) -> Unit:
    """Resolve a unit token or alias.

    Args:
        token: A Unit or its string token.

    Returns:
        The matching Unit.

    Raises:
        InvalidUnitError: If the token names no supported unit.
    """
    if isinstance(token, Unit):
        return token
    if isinstance(token, str):
        if token in UNIT_ALIASES:
            return UNIT_ALIASES[token]
        try:
            return Unit(token)
        except ValueError:
            pass
    raise InvalidUnitError(
        message=f"Unsupported unit: {token!r}",
        details={"unit": repr(token)},
    )


def unit_dimension(unit: Unit | str) -> Dimension:
    """Return the dimension a unit belongs to."""
    return UNITS[parse_unit(unit)].dimension


def si_label(unit: Unit | str) -> str:
    """Return the SI base label for a unit's dimension."""
    return SI_LABELS[unit_dimension(unit)]


def _is_dimension(unit: Unit | str, dimension: Dimension) -> bool:
    try:
        return unit_dimension(unit) is dimension
    except InvalidUnitError:
        return False


def is_length_unit(unit: Unit | str) -> bool:
    return _is_dimension(unit, Dimension.LENGTH)


def is_mass_unit(unit: Unit | str) -> bool:
    return _is_dimension(unit, Dimension.MASS)


def is_ton_unit(unit: Unit | str) -> bool:
    return _is_dimension(unit, Dimension.TON)


def is_area_unit(unit: Unit | str) -> bool:
    return _is_dimension(unit, Dimension.AREA)
