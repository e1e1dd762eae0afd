"""Typed mapping from calculation names to their handlers."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, TypeVar

from pydantic import BaseModel

from tradecalc.calculations import (
    CalcContext,
    CalcResult,
    arc_radius_from_chord,
    circle,
    compound_miter,
    convert,
    cost,
    deg_to_dms,
    diagonal,
    dms_to_deg,
    hip_rafter_length,
    jack_rafter,
    pitch_from_rise_run,
    rise_from_pitch_run,
    run_from_pitch_rise,
    stairs,
    tape,
)

from .schemas import (
    ConvertParams,
    PitchRiseParams,
    PitchRunParams,
    RiseRunParams,
    StairsParams,
    StubParams,
)

P = TypeVar("P", bound=BaseModel)


class CalcFunction(str, Enum):
    """Every calculation name the dispatcher recognizes."""

    PITCH_FROM_RISE_RUN = "pitchFromRiseRun"
    RISE_FROM_PITCH_RUN = "riseFromPitchRun"
    RUN_FROM_PITCH_RISE = "runFromPitchRise"
    DIAGONAL = "diagonal"
    CONVERT = "convert"
    STAIRS = "stairs"
    HIP_RAFTER_LENGTH = "hipRafterLength"
    COMPOUND_MITER = "compoundMiter"
    ARC_RADIUS_FROM_CHORD = "arcRadiusFromChord"
    CIRCLE = "circle"
    JACK_RAFTER = "jackRafter"
    DMS_TO_DEG = "dmsToDeg"
    DEG_TO_DMS = "degToDms"
    TAPE = "tape"
    COST = "cost"


@dataclass(frozen=True)
class FunctionHandler(Generic[P]):
    """Binds a parameter schema to the calculation it feeds.

    Attributes:
        params_model: Pydantic model that validates the ``params`` object.
        run: Callable receiving the validated params and the context.
        implemented: False for documented stubs.
    """

    params_model: type[P]
    run: Callable[[P, CalcContext], CalcResult]
    implemented: bool = True


def _stub_handler(stub: Callable[..., Any]) -> FunctionHandler[StubParams]:
    return FunctionHandler(StubParams, lambda params, ctx: stub(params, ctx), implemented=False)


HANDLERS: Mapping[CalcFunction, FunctionHandler[Any]] = MappingProxyType({
    CalcFunction.PITCH_FROM_RISE_RUN: FunctionHandler(
        RiseRunParams, lambda p, ctx: pitch_from_rise_run(p.rise, p.run, ctx)
    ),
    CalcFunction.RISE_FROM_PITCH_RUN: FunctionHandler(
        PitchRunParams, lambda p, ctx: rise_from_pitch_run(p.pitch, p.run, ctx)
    ),
    CalcFunction.RUN_FROM_PITCH_RISE: FunctionHandler(
        PitchRiseParams, lambda p, ctx: run_from_pitch_rise(p.pitch, p.rise, ctx)
    ),
    CalcFunction.DIAGONAL: FunctionHandler(
        RiseRunParams, lambda p, ctx: diagonal(p.rise, p.run, ctx)
    ),
    CalcFunction.CONVERT: FunctionHandler(
        ConvertParams, lambda p, ctx: convert(p.value, ctx)
    ),
    CalcFunction.STAIRS: FunctionHandler(
        StairsParams, lambda p, ctx: stairs(p.total_rise, p.desired_rise, p.desired_tread, ctx)
    ),
    CalcFunction.HIP_RAFTER_LENGTH: _stub_handler(hip_rafter_length),
    CalcFunction.COMPOUND_MITER: _stub_handler(compound_miter),
    CalcFunction.ARC_RADIUS_FROM_CHORD: _stub_handler(arc_radius_from_chord),
    CalcFunction.CIRCLE: _stub_handler(circle),
    CalcFunction.JACK_RAFTER: _stub_handler(jack_rafter),
    CalcFunction.DMS_TO_DEG: _stub_handler(dms_to_deg),
    CalcFunction.DEG_TO_DMS: _stub_handler(deg_to_dms),
    CalcFunction.TAPE: _stub_handler(tape),
    CalcFunction.COST: _stub_handler(cost),
})


def lookup_function(name: str) -> tuple[CalcFunction, FunctionHandler[Any]] | None:
    """Find the handler registered under ``name``.

    Returns:
        Tuple of (CalcFunction, handler), or None for unknown names.
    """
    try:
        function = CalcFunction(name)
    except ValueError:
        return None
    return function, HANDLERS[function]


def describe_function(function: CalcFunction) -> dict[str, Any]:
    """Describe a function's parameters for the catalogue endpoint."""
    handler = HANDLERS[function]
    required: list[str] = []
    optional: list[str] = []
    for name, field in handler.params_model.model_fields.items():
        wire_name = field.alias or name
        (required if field.is_required() else optional).append(wire_name)
    return {
        "name": function.value,
        "implemented": handler.implemented,
        "params": {"required": required, "optional": optional},
    }


def list_functions() -> list[dict[str, Any]]:
    """Describe every registered function, implemented ones first."""
    described = [describe_function(function) for function in CalcFunction]
    return sorted(described, key=lambda item: not item["implemented"])
