"""Roof pitch, rise and run.

Pitch follows the roofing convention of inches of rise per 12 inches of run.
"""

import math

from tradecalc.exceptions import DivisionByZeroError, assert_finite_number, assert_finite_result
from tradecalc.fraction import to_mixed_fraction_string
from tradecalc.units import format_value, length_to_meters, meters_to_length

from .types import DEFAULT_CONTEXT, CalcContext, CalcResult

PITCH_BASE = 12
PITCH_UNIT = "pitch/12"


def pitch_from_rise_run(rise: float, run: float, ctx: CalcContext = DEFAULT_CONTEXT) -> CalcResult:
    """Compute the X/12 pitch of a slope.

    Args:
        rise: Vertical rise in ``ctx.in_unit``.
        run: Horizontal run in ``ctx.in_unit``; must be non-zero.
        ctx: Calculation context.

    Returns:
        CalcResult whose value is the pitch, with ``angleDeg`` and ``slope``
        in meta.

    Raises:
        InvalidNumberError: If an input is not finite.
        InvalidUnitError: If ``ctx.in_unit`` is not a length unit.
        DivisionByZeroError: If ``run`` is zero.
        InvalidParamError: If the slope overflows.
    """
    rise = assert_finite_number(rise, "rise")
    run = assert_finite_number(run, "run")
    ctx.require_length_units(output=False)

    rise_m = length_to_meters(rise, ctx.in_unit)
    run_m = length_to_meters(run, ctx.in_unit)
    if run_m == 0:
        raise DivisionByZeroError(message="run must not be zero", details={"run": run})

    slope = assert_finite_result(rise_m / run_m, "slope")
    pitch = assert_finite_result(slope * PITCH_BASE, "pitch")
    angle_deg = math.degrees(math.atan(slope))

    return CalcResult(
        value=pitch,
        unit=PITCH_UNIT,
        display=f"{to_mixed_fraction_string(pitch, ctx.precision)}/{PITCH_BASE}",
        meta={"angleDeg": angle_deg, "slope": slope, "pitchIn": pitch},
    )


def rise_from_pitch_run(pitch: float, run: float, ctx: CalcContext = DEFAULT_CONTEXT) -> CalcResult:
    """Compute the rise over ``run`` for an X/12 pitch."""
    pitch = assert_finite_number(pitch, "pitch")
    run = assert_finite_number(run, "run")
    ctx.require_length_units()

    rise_m = assert_finite_result(pitch / PITCH_BASE * length_to_meters(run, ctx.in_unit), "rise")
    out = meters_to_length(rise_m, ctx.out_unit)
    return CalcResult(
        value=rise_m,
        unit="m",
        display=format_value(out, ctx.out_unit, ctx.precision),
        meta={"outValue": out, "outUnit": ctx.out_unit.value},
    )


def run_from_pitch_rise(pitch: float, rise: float, ctx: CalcContext = DEFAULT_CONTEXT) -> CalcResult:
    """Compute the run that produces ``rise`` at an X/12 pitch.

    Raises:
        DivisionByZeroError: If ``pitch`` is zero.
    """
    pitch = assert_finite_number(pitch, "pitch")
    rise = assert_finite_number(rise, "rise")
    ctx.require_length_units()
    if pitch == 0:
        raise DivisionByZeroError(message="pitch must not be zero", details={"pitch": pitch})

    run_m = assert_finite_result(PITCH_BASE / pitch * length_to_meters(rise, ctx.in_unit), "run")
    out = meters_to_length(run_m, ctx.out_unit)
    return CalcResult(
        value=run_m,
        unit="m",
        display=format_value(out, ctx.out_unit, ctx.precision),
        meta={"outValue": out, "outUnit": ctx.out_unit.value},
    )
