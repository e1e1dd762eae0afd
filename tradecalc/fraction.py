"""Exact fractions and fractional-inch formatting.

Values are quantized to the nearest multiple of ``1/denom`` before they are
split into whole and fractional parts, so rounding carries into the whole
part instead of producing strings like ``1 16/16``.
"""

import math
import re
from typing import Any, NamedTuple

from .exceptions import (
    DivisionByZeroError,
    InvalidNumberError,
    InvalidParamError,
    assert_finite_number,
    assert_finite_result,
)

DEFAULT_DENOMINATOR = 16
INCHES_PER_FOOT = 12

_MIXED_RE = re.compile(
    r'^(?P<sign>-)?\s*'
    r'(?:(?P<whole>\d+)(?:\s+(?P<num>\d+)/(?P<den>\d+))?|(?P<fnum>\d+)/(?P<fden>\d+))'
    r'\s*"?$'
)


class Rational(NamedTuple):
    """An exact fraction.

    Attributes:
        numerator: Signed integer numerator.
        denominator: Integer denominator, positive once reduced.
    """

    numerator: int
    denominator: int


class MixedNumber(NamedTuple):
    """A rational split into sign, whole part and proper fraction."""

    sign: int
    whole: int
    fraction: Rational


def _as_integer(value: Any, name: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = assert_finite_number(value, name)
    if not number.is_integer():
        raise InvalidNumberError(
            message=f"{name} must be an integer",
            details={"name": name, "value": repr(value)},
        )
    return int(number)


def _validate_denominator(denom: Any) -> int:
    if isinstance(denom, bool) or not isinstance(denom, int) or denom <= 0:
        raise InvalidParamError(
            message="denominator must be a positive integer",
            details={"denom": repr(denom)},
        )
    return denom


def _quantize(value: float, denom: int) -> int:
    """Return the number of ``1/denom`` steps nearest to ``value`` (half up)."""
    return math.floor(assert_finite_result(value * denom, "value") + 0.5)


def reduce_rational(r: Rational | tuple[Any, Any]) -> Rational:
    """Reduce a fraction to lowest terms.

    The sign is folded into the numerator and the denominator is made
    positive. Zero always reduces to ``0/1``.

    Args:
        r: Numerator/denominator pair. Float components are accepted when
            they hold integral values.

    Returns:
        The reduced Rational.

    Raises:
        InvalidNumberError: If a component is non-finite or non-integral.
        DivisionByZeroError: If the denominator is zero.
    """
    numerator = _as_integer(r[0], "numerator")
    denominator = _as_integer(r[1], "denominator")
    if denominator == 0:
        raise DivisionByZeroError(
            message="denominator must not be zero",
            details={"numerator": numerator},
        )
    if numerator == 0:
        return Rational(0, 1)

    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    g = math.gcd(numerator, denominator)
    return Rational(numerator // g, denominator // g)


def to_rational(value: float, denom: int = DEFAULT_DENOMINATOR) -> Rational:
    """Quantize a real number to the nearest multiple of ``1/denom``.

    Args:
        value: Finite real number.
        denom: Positive integer denominator controlling granularity.

    Returns:
        The reduced Rational nearest to ``value``.

    Raises:
        InvalidNumberError: If ``value`` is not finite.
        InvalidParamError: If ``denom`` is not a positive integer.
    """
    number = assert_finite_number(value, "value")
    denom = _validate_denominator(denom)
    return reduce_rational(Rational(_quantize(number, denom), denom))


def rational_to_float(r: Rational) -> float:
    """Convert a Rational back to a float."""
    reduced = reduce_rational(r)
    return reduced.numerator / reduced.denominator


def to_mixed_number(r: Rational) -> MixedNumber:
    """Split a rational into sign, whole part and proper fraction."""
    reduced = reduce_rational(r)
    sign = -1 if reduced.numerator < 0 else 1
    whole, remainder = divmod(abs(reduced.numerator), reduced.denominator)
    if remainder == 0:
        return MixedNumber(sign, whole, Rational(0, 1))
    return MixedNumber(sign, whole, reduce_rational(Rational(remainder, reduced.denominator)))


def _format_magnitude(mixed: MixedNumber) -> str:
    whole, fraction = mixed.whole, mixed.fraction
    if fraction.numerator == 0:
        return str(whole)
    if whole == 0:
        return f"{fraction.numerator}/{fraction.denominator}"
    return f"{whole} {fraction.numerator}/{fraction.denominator}"


def to_mixed_fraction_string(value: float, denom: int = DEFAULT_DENOMINATOR) -> str:
    """Format a real number as ``"W N/D"``, ``"N/D"`` or ``"W"``.

    Negative values get a single leading ``-``. A value that quantizes to
    zero renders as ``"0"`` without a sign.

    Example:
        >>> to_mixed_fraction_string(3.375, 16)
        '3 3/8'
        >>> to_mixed_fraction_string(1.9999, 16)
        '2'
    """
    number = assert_finite_number(value, "value")
    magnitude = to_rational(abs(number), denom)
    sign = "-" if number < 0 and magnitude.numerator != 0 else ""
    return sign + _format_magnitude(to_mixed_number(magnitude))


def parse_mixed_fraction(text: str) -> float:
    """Parse a string produced by :func:`to_mixed_fraction_string`.

    Accepts ``"3"``, ``"3/8"``, ``"3 3/8"`` and ``"-3 3/8"``, with an
    optional trailing inch mark.

    Raises:
        InvalidNumberError: If the text is not a mixed fraction.
        DivisionByZeroError: If the fraction has a zero denominator.
    """
    match = _MIXED_RE.match(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise InvalidNumberError(
            message="value is not a mixed fraction",
            details={"value": repr(text)},
        )

    if match.group("fnum") is not None:
        whole, numerator, denominator = 0, int(match.group("fnum")), int(match.group("fden"))
    else:
        whole = int(match.group("whole"))
        numerator = int(match.group("num") or 0)
        denominator = int(match.group("den") or 1)

    fraction = reduce_rational(Rational(numerator, denominator))
    magnitude = whole + fraction.numerator / fraction.denominator
    return -magnitude if match.group("sign") else magnitude


def format_inches_fraction(inches: float, denom: int = DEFAULT_DENOMINATOR) -> str:
    """Format decimal inches as a reduced mixed fraction.

    Example:
        >>> format_inches_fraction(3.375)
        '3 3/8"'
    """
    if isinstance(inches, float) and not math.isfinite(inches):
        return str(inches)
    return f'{to_mixed_fraction_string(inches, denom)}"'


def format_feet_inches(total_inches: float, denom: int = DEFAULT_DENOMINATOR) -> str:
    """Format total inches as feet plus fractional inches.

    The inch count is quantized before the feet split, so ``11.99999``
    renders as ``1' 0"``.

    Example:
        >>> format_feet_inches(99.375)
        '8\\' 3 3/8"'
    """
    if isinstance(total_inches, float) and not math.isfinite(total_inches):
        return str(total_inches)
    number = assert_finite_number(total_inches, "total_inches")
    denom = _validate_denominator(denom)

    ticks = _quantize(abs(number), denom)
    feet, remainder = divmod(ticks, INCHES_PER_FOOT * denom)
    inches = to_mixed_number(Rational(remainder, denom))
    sign = "-" if number < 0 and ticks != 0 else ""
    return f"{sign}{feet}' {_format_magnitude(inches)}\""
