"""Diagonal (hypotenuse) of a right triangle."""

import math

from tradecalc.exceptions import InvalidParamError, assert_finite_number, assert_finite_result
from tradecalc.units import format_value, length_to_meters, meters_to_length

from .types import DEFAULT_CONTEXT, CalcContext, CalcResult


def diagonal(rise: float, run: float, ctx: CalcContext = DEFAULT_CONTEXT) -> CalcResult:
    """Compute the diagonal spanning ``rise`` and ``run``.

    A single zero leg is a valid degenerate triangle; both legs zero is not.

    Raises:
        InvalidNumberError: If an input is not finite.
        InvalidUnitError: If the context units are not length units.
        InvalidParamError: If both legs are zero or the diagonal overflows.
    """
    rise = assert_finite_number(rise, "rise")
    run = assert_finite_number(run, "run")
    ctx.require_length_units()
    if rise == 0 and run == 0:
        raise InvalidParamError(
            message="rise and run cannot both be zero",
            details={"rise": rise, "run": run},
        )

    diag_m = assert_finite_result(
        math.hypot(length_to_meters(rise, ctx.in_unit), length_to_meters(run, ctx.in_unit)),
        "diagonal",
    )
    out = meters_to_length(diag_m, ctx.out_unit)
    return CalcResult(
        value=diag_m,
        unit="m",
        display=format_value(out, ctx.out_unit, ctx.precision),
        meta={"outValue": out, "outUnit": ctx.out_unit.value},
    )
