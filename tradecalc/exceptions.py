"""Custom exceptions for calculation failures."""

import math
from typing import Any


class CalcError(Exception):
    """Base exception for all calculation errors.

    Attributes:
        message: Human-readable description of the failure.
        error_code: Machine-readable error code.
        status: HTTP-style status the boundary responds with.
        details: Optional structured context for the failure.
    """

    default_code = "CALC_ERROR"
    default_status = 400

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status: int | None = None,
        details: Any | None = None,
    ):
        self.message = message
        self.error_code = code or self.default_code
        self.status = status or self.default_status
        self.details = details
        super().__init__(self.message)


class InvalidRequestError(CalcError):
    """Raised when the request envelope is malformed."""

    default_code = "INVALID_REQUEST"


class InvalidNumberError(CalcError):
    """Raised when a numeric parameter is missing, non-numeric, or non-finite."""

    default_code = "INVALID_NUMBER"


class InvalidUnitError(CalcError):
    """Raised when a unit is unknown or has the wrong dimension."""

    default_code = "INVALID_UNIT"


class UnsupportedConversionError(CalcError):
    """Raised when two units cannot be converted into each other.

    Attributes:
        from_unit: Source unit token.
        to_unit: Target unit token.
    """

    default_code = "UNSUPPORTED_CONVERSION"

    def __init__(self, from_unit: str, to_unit: str):
        super().__init__(
            message=f"Incompatible unit conversion: {from_unit} -> {to_unit}",
            details={"from": from_unit, "to": to_unit},
        )
        self.from_unit = from_unit
        self.to_unit = to_unit


class DivisionByZeroError(CalcError):
    """Raised when a parameter that must be non-zero is zero."""

    default_code = "DIV_BY_ZERO"


class InvalidParamError(CalcError):
    """Raised when a parameter violates a domain constraint."""

    default_code = "INVALID_PARAM"


class PayloadTooLargeError(CalcError):
    """Raised when a request body exceeds the configured size limit."""

    default_code = "PAYLOAD_TOO_LARGE"
    default_status = 413

    def __init__(self, limit: int):
        super().__init__(message="request body too large", details={"limit": limit})
        self.limit = limit


class NotImplementedCalcError(CalcError):
    """Raised for functions that are documented but not built yet.

    Attributes:
        function_name: Name of the requested function.
    """

    default_code = "NOT_IMPLEMENTED"
    default_status = 501

    def __init__(self, function_name: str, message: str | None = None):
        super().__init__(message=message or f"{function_name} is not implemented")
        self.function_name = function_name


def assert_finite_number(value: Any, name: str) -> float:
    """Ensure a value is a finite real number.

    Args:
        value: Candidate value.
        name: Parameter name used in the error message.

    Returns:
        The value as a float.

    Raises:
        InvalidNumberError: If the value is not a finite int or float.
    """
    error = InvalidNumberError(
        message=f"{name} must be a finite number",
        details={"name": name, "value": repr(value)},
    )
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise error
    try:
        number = float(value)
    except OverflowError as exc:
        raise error from exc
    if not math.isfinite(number):
        raise error
    return number


def assert_finite_result(value: float, name: str) -> float:
    """Ensure a computed value did not overflow.

    Raises:
        InvalidParamError: If ``value`` is infinite or NaN.
    """
    if not math.isfinite(value):
        raise InvalidParamError(
            message=f"{name} is out of range",
            details={"name": name},
        )
    return value
