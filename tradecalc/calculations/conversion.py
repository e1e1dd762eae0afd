"""Plain unit conversion as a calculation."""

from tradecalc.units import convert_unit, format_value, to_si

from .types import DEFAULT_CONTEXT, CalcContext, CalcResult


def convert(value: float, ctx: CalcContext = DEFAULT_CONTEXT) -> CalcResult:
    """Convert ``value`` from ``ctx.in_unit`` to ``ctx.out_unit``.

    The result value is the input normalized to SI; the display and
    ``meta.outValue`` carry the converted value.
    """
    converted = convert_unit(value, ctx.in_unit, ctx.out_unit)
    value_si, si_unit = to_si(value, ctx.in_unit)
    return CalcResult(
        value=value_si,
        unit=si_unit,
        display=format_value(converted.value, ctx.out_unit, ctx.precision),
        meta={
            "outValue": converted.value,
            "outUnit": ctx.out_unit.value,
            "kind": converted.kind,
        },
    )
