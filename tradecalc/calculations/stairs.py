"""Stair layout.

The total rise is divided evenly across ``ceil(totalRise / desiredRise)``
steps so every riser is the same height and the flight lands exactly on the
total rise. The stair rule (``2 * riser + tread`` close to 63 inches) is
reported in meta and never fails the calculation.
"""

import math

from tradecalc.exceptions import InvalidParamError, assert_finite_number, assert_finite_result
from tradecalc.units import format_value, length_to_meters, meters_to_length
from tradecalc.units.table import INCH_TO_M

from .types import DEFAULT_CONTEXT, CalcContext, CalcResult

DEFAULT_RISER_IN = 7.75
DEFAULT_TREAD_IN = 10.0
STAIR_RULE_TARGET_IN = 63.0
STAIR_RULE_TOLERANCE_IN = 3.0

# Ratios within this many decimals of an integer count as exact.
STEP_COUNT_DECIMALS = 9


def _positive_length(value: float, name: str, ctx: CalcContext) -> float:
    value = assert_finite_number(value, name)
    if value <= 0:
        raise InvalidParamError(message=f"{name} must be > 0", details={name: value})
    value_m = length_to_meters(value, ctx.in_unit)
    if value_m <= 0:
        raise InvalidParamError(message=f"{name} is too small", details={name: value})
    return value_m


def stairs(
    total_rise: float,
    desired_rise: float | None = None,
    desired_tread: float | None = None,
    ctx: CalcContext = DEFAULT_CONTEXT,
) -> CalcResult:
    """Lay out a straight flight of stairs.

    Args:
        total_rise: Floor-to-floor rise in ``ctx.in_unit``.
        desired_rise: Maximum riser height in ``ctx.in_unit``. Defaults to
            7.75 inches.
        desired_tread: Tread depth in ``ctx.in_unit``. Defaults to 10 inches.
        ctx: Calculation context.

    Returns:
        CalcResult whose value is the actual riser height in meters.

    Raises:
        InvalidNumberError: If an input is not finite.
        InvalidUnitError: If the context units are not length units.
        InvalidParamError: If a length is not positive or a derived
            value overflows.
    """
    ctx.require_length_units()
    total_rise_m = _positive_length(total_rise, "totalRise", ctx)
    if desired_rise is None:
        desired_rise_m = DEFAULT_RISER_IN * INCH_TO_M
    else:
        desired_rise_m = _positive_length(desired_rise, "desiredRise", ctx)
    if desired_tread is None:
        tread_m = DEFAULT_TREAD_IN * INCH_TO_M
    else:
        tread_m = _positive_length(desired_tread, "desiredTread", ctx)

    ratio = assert_finite_result(total_rise_m / desired_rise_m, "numSteps")
    ratio = round(ratio, STEP_COUNT_DECIMALS)
    num_steps = max(1, math.ceil(ratio))
    actual_rise_m = total_rise_m / num_steps
    num_treads = num_steps - 1

    stair_rule_in = assert_finite_result((2 * actual_rise_m + tread_m) / INCH_TO_M, "stairRule")
    stair_rule_ok = abs(stair_rule_in - STAIR_RULE_TARGET_IN) <= STAIR_RULE_TOLERANCE_IN

    riser_out = meters_to_length(actual_rise_m, ctx.out_unit)
    tread_out = meters_to_length(tread_m, ctx.out_unit)
    display = (
        f"{num_steps} steps · riser {format_value(riser_out, ctx.out_unit, ctx.precision)}"
        f" · tread {format_value(tread_out, ctx.out_unit, ctx.precision)}"
    )

    return CalcResult(
        value=actual_rise_m,
        unit="m",
        display=display,
        meta={
            "numSteps": num_steps,
            "numTreads": num_treads,
            "actualRiseM": actual_rise_m,
            "actualTreadM": tread_m,
            "totalRunM": assert_finite_result(num_treads * tread_m, "totalRun"),
            "riserOut": riser_out,
            "treadOut": tread_out,
            "outUnit": ctx.out_unit.value,
            "stairRuleIn": stair_rule_in,
            "stairRuleOk": stair_rule_ok,
        },
    )
