"""Units module - unit table, converters and display formatting."""

from .table import (
    Dimension,
    Unit,
    UnitDef,
    UNITS,
    parse_unit,
    unit_dimension,
    si_label,
    is_length_unit,
    is_mass_unit,
    is_ton_unit,
    is_area_unit,
)
from .convert import (
    ConversionResult,
    length_to_meters,
    meters_to_length,
    mass_to_kg,
    kg_to_mass,
    ton_to_kg,
    kg_to_ton,
    area_to_m2,
    m2_to_area,
    to_si,
    from_si,
    convert_unit,
    format_value,
)


__all__ = [
    "Dimension",
    "Unit",
    "UnitDef",
    "UNITS",
    "parse_unit",
    "unit_dimension",
    "si_label",
    "is_length_unit",
    "is_mass_unit",
    "is_ton_unit",
    "is_area_unit",
    "ConversionResult",
    "length_to_meters",
    "meters_to_length",
    "mass_to_kg",
    "kg_to_mass",
    "ton_to_kg",
    "kg_to_ton",
    "area_to_m2",
    "m2_to_area",
    "to_si",
    "from_si",
    "convert_unit",
    "format_value",
]
