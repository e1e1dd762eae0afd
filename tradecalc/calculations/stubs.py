"""Documented calculations that are not built yet.

Each stub raises NotImplementedCalcError so the HTTP boundary can answer 501
instead of a generic error.
"""

from typing import Any, Callable, NoReturn

from tradecalc.exceptions import NotImplementedCalcError


def _stub(function_name: str) -> Callable[..., NoReturn]:
    def run(*args: Any, **kwargs: Any) -> NoReturn:
        raise NotImplementedCalcError(function_name, f"{function_name} is not implemented (stub)")

    run.__name__ = function_name
    run.__doc__ = f"Placeholder for {function_name}; always raises NotImplementedCalcError."
    return run


hip_rafter_length = _stub("hipRafterLength")
compound_miter = _stub("compoundMiter")
arc_radius_from_chord = _stub("arcRadiusFromChord")
circle = _stub("circle")
jack_rafter = _stub("jackRafter")
dms_to_deg = _stub("dmsToDeg")
deg_to_dms = _stub("degToDms")
tape = _stub("tape")
cost = _stub("cost")
