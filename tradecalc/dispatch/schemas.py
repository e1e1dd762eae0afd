"""Pydantic schemas for the calculation request envelope and parameters."""

import math
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic.alias_generators import to_camel

from tradecalc.fraction import DEFAULT_DENOMINATOR
from tradecalc.units import Unit
from tradecalc.units.table import UNIT_ALIASES

MAX_PRECISION = 1024


def _finite(value: int | float) -> float:
    """Reject numbers that do not fit a finite float."""
    try:
        number = float(value)
    except OverflowError as exc:
        raise ValueError("number is too large") from exc
    if not math.isfinite(number):
        raise ValueError("number must be finite")
    return number


FiniteNumber = Annotated[Union[StrictInt, StrictFloat], AfterValidator(_finite)]


class CamelModel(BaseModel):
    """Base model with camelCase wire names that forbids unknown fields."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class CalcRequest(CamelModel):
    """Envelope for a calculation request.

    Attributes:
        function: Name of the calculation to run.
        params: Function-specific parameters, validated per function.
        in_unit: Unit of the numeric inputs.
        out_unit: Unit of the display string; defaults to ``in_unit``.
        precision: Fraction denominator for display rounding.
    """

    function: StrictStr = Field(..., min_length=1, description="Calculation name")
    params: dict[str, Any] = Field(default_factory=dict, description="Function parameters")
    in_unit: Unit = Field(default=Unit.FT, description="Input unit")
    out_unit: Unit | None = Field(default=None, description="Output unit")
    precision: StrictInt = Field(
        default=DEFAULT_DENOMINATOR,
        ge=1,
        le=MAX_PRECISION,
        description="Fraction denominator (16 = nearest 1/16)",
    )

    @field_validator("in_unit", "out_unit", mode="before")
    @classmethod
    def resolve_unit_alias(cls, value: Any) -> Any:
        """Map unit aliases such as ``lbs`` onto their canonical token."""
        if isinstance(value, str) and value in UNIT_ALIASES:
            return UNIT_ALIASES[value]
        return value


class RiseRunParams(CamelModel):
    """Parameters for pitchFromRiseRun and diagonal."""

    rise: FiniteNumber
    run: FiniteNumber


class PitchRunParams(CamelModel):
    """Parameters for riseFromPitchRun."""

    pitch: FiniteNumber
    run: FiniteNumber


class PitchRiseParams(CamelModel):
    """Parameters for runFromPitchRise."""

    pitch: FiniteNumber
    rise: FiniteNumber


class ConvertParams(CamelModel):
    """Parameters for convert."""

    value: FiniteNumber


class StairsParams(CamelModel):
    """Parameters for stairs.

    ``desiredRisePerStep`` is accepted as another name for ``desiredRise``.
    """

    total_rise: FiniteNumber
    desired_rise: FiniteNumber | None = Field(
        default=None,
        validation_alias=AliasChoices("desiredRise", "desiredRisePerStep", "desired_rise"),
    )
    desired_tread: FiniteNumber | None = None


class StubParams(BaseModel):
    """Accepts anything; stubs never read their parameters."""

    model_config = ConfigDict(extra="allow")


class CalcSuccessResponse(CamelModel):
    """Response body for a successful calculation.

    Attributes:
        result: Value in ``out_unit``; results without a unit dimension
            (pitch) carry their raw value.
        value: Value normalized to SI base units.
        unit: Label of the unit ``value`` is expressed in.
        display: Human-formatted result.
        out_unit: Unit ``result`` and ``display`` are expressed in.
        meta: Function-specific extra fields plus the precision used.
    """

    ok: Literal[True] = True
    result: float
    value: float
    unit: str
    display: str
    out_unit: Unit
    meta: dict[str, Any] = Field(default_factory=dict)


class CalcErrorResponse(CamelModel):
    """Response body for a failed calculation."""

    ok: Literal[False] = False
    error_code: str
    message: str
    details: Any | None = None
