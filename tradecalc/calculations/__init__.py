"""Calculations module - geometry, stairs and conversion."""

from .types import CalcContext, CalcResult, DEFAULT_CONTEXT
from .pitch import pitch_from_rise_run, rise_from_pitch_run, run_from_pitch_rise
from .diagonal import diagonal
from .stairs import stairs
from .conversion import convert
from .stubs import (
    hip_rafter_length,
    compound_miter,
    arc_radius_from_chord,
    circle,
    jack_rafter,
    dms_to_deg,
    deg_to_dms,
    tape,
    cost,
)


__all__ = [
    "CalcContext",
    "CalcResult",
    "DEFAULT_CONTEXT",
    "pitch_from_rise_run",
    "rise_from_pitch_run",
    "run_from_pitch_rise",
    "diagonal",
    "stairs",
    "convert",
    "hip_rafter_length",
    "compound_miter",
    "arc_radius_from_chord",
    "circle",
    "jack_rafter",
    "dms_to_deg",
    "deg_to_dms",
    "tape",
    "cost",
]
