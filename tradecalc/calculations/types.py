"""Context and result records shared by every calculation."""

from dataclasses import dataclass, field
from typing import Any

from tradecalc.exceptions import InvalidParamError, InvalidUnitError
from tradecalc.fraction import DEFAULT_DENOMINATOR
from tradecalc.units import Unit, is_length_unit, parse_unit


@dataclass(frozen=True)
class CalcContext:
    """Units and display precision for a single calculation.

    Attributes:
        in_unit: Unit the numeric inputs are expressed in.
        out_unit: Unit the display string is rendered in. Defaults to
            ``in_unit``.
        precision: Fraction denominator for display rounding (16 = 1/16").
    """

    in_unit: Unit = Unit.FT
    out_unit: Unit | None = None
    precision: int = DEFAULT_DENOMINATOR

    def __post_init__(self) -> None:
        in_unit = parse_unit(self.in_unit)
        out_unit = in_unit if self.out_unit is None else parse_unit(self.out_unit)
        object.__setattr__(self, "in_unit", in_unit)
        object.__setattr__(self, "out_unit", out_unit)

        precision = self.precision
        if isinstance(precision, bool) or not isinstance(precision, int) or precision <= 0:
            raise InvalidParamError(
                message="precision must be a positive integer",
                details={"precision": repr(precision)},
            )

    def require_length_units(self, output: bool = True) -> None:
        """Ensure the context units are length units.

        Args:
            output: Whether ``out_unit`` must be a length unit as well.

        Raises:
            InvalidUnitError: If a required unit is not a length unit.
        """
        units = (self.in_unit, self.out_unit) if output else (self.in_unit,)
        for unit in units:
            if not is_length_unit(unit):
                raise InvalidUnitError(
                    message=f"{unit.value} is not a length unit",
                    details={"inUnit": self.in_unit.value, "outUnit": self.out_unit.value},
                )


DEFAULT_CONTEXT = CalcContext()


@dataclass(frozen=True)
class CalcResult:
    """Outcome of a calculation.

    Attributes:
        value: Result normalized to SI base units (pitch results use X/12).
        unit: Label of the unit ``value`` is expressed in.
        display: Human-formatted result in the context's output unit.
        meta: Function-specific extra fields.
    """

    value: float
    unit: str
    display: str
    meta: dict[str, Any] = field(default_factory=dict)
