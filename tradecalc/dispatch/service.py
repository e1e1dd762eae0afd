"""Service layer that validates, routes and normalizes calculation requests."""

import json
from typing import Any, NamedTuple

from pydantic import BaseModel, ValidationError
from structlog import get_logger

from tradecalc.calculations import CalcContext, CalcResult
from tradecalc.exceptions import (
    CalcError,
    InvalidNumberError,
    InvalidParamError,
    InvalidRequestError,
    NotImplementedCalcError,
    assert_finite_result,
)
from tradecalc.units import from_si, si_label

from .registry import FunctionHandler, lookup_function
from .schemas import CalcErrorResponse, CalcRequest, CalcSuccessResponse

MAX_VALIDATION_ERRORS = 5

logger = get_logger()


class DispatchOutcome(NamedTuple):
    """HTTP-style status and JSON body produced by a dispatch.

    Attributes:
        status_code: Response status code.
        body: JSON-serializable response body.
    """

    status_code: int
    body: dict[str, Any]


def format_validation_errors(exc: ValidationError) -> list[dict[str, object]]:
    """Sanitize validation errors for safe responses.

    Args:
        exc: Validation error instance.

    Returns:
        Limited list of simplified error details.
    """
    details: list[dict[str, object]] = []
    for item in exc.errors()[:MAX_VALIDATION_ERRORS]:
        details.append(
            {
                "loc": list(item.get("loc", [])),
                "msg": item.get("msg", "Invalid value"),
                "type": item.get("type", "value_error"),
            }
        )
    return details


def error_body(error: CalcError) -> dict[str, Any]:
    """Render a CalcError as a response body."""
    response = CalcErrorResponse(
        error_code=error.error_code,
        message=error.message,
        details=error.details,
    )
    return response.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_request(payload: Any) -> CalcRequest:
    """Validate the request envelope.

    Raises:
        InvalidRequestError: If the payload is not an object or fails
            schema validation.
    """
    if not isinstance(payload, dict):
        raise InvalidRequestError(message="Request body must be a JSON object")
    try:
        return CalcRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRequestError(
            message="Invalid request",
            details=format_validation_errors(exc),
        ) from exc


def resolve_handler(name: str) -> FunctionHandler[Any]:
    """Return the handler for ``name``.

    Stub handlers are returned as-is; running them raises
    NotImplementedCalcError.

    Raises:
        NotImplementedCalcError: If the name is unknown.
    """
    found = lookup_function(name)
    if found is None:
        raise NotImplementedCalcError(name, f"Unknown function: {name}")
    _, handler = found
    return handler


def parse_params(handler: FunctionHandler[Any], params: dict[str, Any]) -> BaseModel:
    """Validate function parameters against the handler's schema.

    Raises:
        InvalidParamError: If the only problems are unexpected fields.
        InvalidNumberError: If a numeric parameter is missing or invalid.
    """
    try:
        return handler.params_model.model_validate(params)
    except ValidationError as exc:
        details = format_validation_errors(exc)
        if all(item["type"] == "extra_forbidden" for item in exc.errors()):
            raise InvalidParamError(message="Unexpected parameters", details=details) from exc
        raise InvalidNumberError(
            message="Parameters must be finite numbers",
            details=details,
        ) from exc


def run_calculation(request: CalcRequest) -> tuple[CalcContext, CalcResult]:
    """Resolve, validate and execute a calculation request.

    Args:
        request: Validated request envelope.

    Returns:
        Tuple of the context used and the calculation result.

    Raises:
        CalcError: For every failure, with unexpected exceptions wrapped as
            CALC_ERROR.
    """
    handler = resolve_handler(request.function)
    ctx = CalcContext(
        in_unit=request.in_unit,
        out_unit=request.out_unit,
        precision=request.precision,
    )
    params = parse_params(handler, request.params)
    try:
        result = handler.run(params, ctx)
    except CalcError:
        raise
    except Exception as exc:
        logger.exception("calc_unexpected_error", function=request.function)
        raise CalcError(message=f"Calculation failed: {exc}") from exc
    assert_finite_result(result.value, "result")
    return ctx, result


def out_value(result: CalcResult, out_unit: Any) -> float | None:
    """Express an SI result in ``out_unit`` when the dimensions agree."""
    if result.unit != si_label(out_unit):
        return None
    return from_si(result.value, out_unit)


def dispatch(payload: Any) -> DispatchOutcome:
    """Run a decoded request payload and build the response.

    Args:
        payload: Decoded JSON body.

    Returns:
        DispatchOutcome with the status code and response body.
    """
    function = payload.get("function") if isinstance(payload, dict) else None
    try:
        request = parse_request(payload)
        ctx, result = run_calculation(request)
        converted = out_value(result, ctx.out_unit)
    except CalcError as exc:
        log = logger.warning if exc.status >= 500 else logger.info
        log("calc_failed", function=function, error_code=exc.error_code, message=exc.message)
        return DispatchOutcome(exc.status, error_body(exc))

    response = CalcSuccessResponse(
        result=result.value if converted is None else converted,
        value=result.value,
        unit=result.unit,
        display=result.display,
        out_unit=ctx.out_unit,
        meta={"precision": ctx.precision, **result.meta},
    )
    logger.info("calc_dispatched", function=request.function, unit=result.unit)
    return DispatchOutcome(200, response.model_dump(mode="json", by_alias=True))


def dispatch_json(raw_body: bytes | str) -> DispatchOutcome:
    """Decode a raw JSON body and dispatch it.

    Malformed or too deeply nested JSON is answered with INVALID_REQUEST.
    """
    try:
        payload = json.loads(raw_body)
    except (ValueError, RecursionError):
        error = InvalidRequestError(message="Malformed JSON body")
        logger.info("calc_failed", function=None, error_code=error.error_code, message=error.message)
        return DispatchOutcome(error.status, error_body(error))
    return dispatch(payload)
