"""
Numeric utility functions: geometry formulas, arithmetic helpers, primality
testing and string-to-number coercion.

Every function here is pure and stateless: it takes scalar (or string)
arguments and returns a plain Python scalar. Undefined results are reported
with a NaN sentinel or a caller-supplied default rather than an exception,
except where the underlying arithmetic itself is undefined (division by zero
in the linear equation root), which is left to the caller.
"""

import numbers
import re
from decimal import Decimal
from functools import singledispatch
from typing import Any

import numpy as np
import pandas as pd
from scipy.spatial import distance

from numtasks.utils.logging import get_logger

logger = get_logger(__name__)

HALF_AWAY_FROM_ZERO = "half_away_from_zero"
HALF_UP = "half_up"
ROUNDING_MODES = (HALF_AWAY_FROM_ZERO, HALF_UP)

# Optional sign followed by ASCII digits, after optional leading whitespace
_LEADING_INTEGER = re.compile(r"^\s*([+-]?[0-9]+)")


def _round_half_away_from_zero(value: float) -> float:
    # value - floor(value) is exact, so ties are detected without drift
    magnitude = abs(value)
    rounded = np.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1.0
    return float(np.copysign(rounded, value))


def _round_half_up(value: float) -> float:
    rounded = np.floor(value)
    if value - rounded >= 0.5:
        rounded += 1.0
    return float(rounded)


_ROUNDERS = {
    HALF_AWAY_FROM_ZERO: _round_half_away_from_zero,
    HALF_UP: _round_half_up,
}


def get_rectangle_area(width: float, height: float) -> float:
    """
    Compute the area of a rectangle given its width and height.

    **Mathematical**: A = width * height

    Args:
        width: Rectangle width.
        height: Rectangle height.

    Returns:
        Area of the rectangle (e.g. 5, 10 -> 50).
    """
    return float(width * height)


def get_circle_circumference(radius: float) -> float:
    """
    Compute the circumference of a circle given its radius.

    **Mathematical**: C = 2 * pi * r

    Args:
        radius: Circle radius.

    Returns:
        Circumference as a float (5 -> 31.41592653589793, 0 -> 0.0).
    """
    return float(2 * np.pi * radius)


def get_average(value1: float, value2: float) -> float:
    """
    Return the arithmetic mean of two numbers: (value1 + value2) / 2.

    Examples: (5, 5) -> 5, (10, 0) -> 5, (-3, 3) -> 0.
    """
    return float((value1 + value2) / 2)


def get_distance_between_points(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Compute the Euclidean distance between two points in the Cartesian plane.

    **Mathematical**:
        d = sqrt((x2 - x1)^2 + (y2 - y1)^2)

    **Functionally**:
    - Delegates to scipy.spatial.distance.euclidean on the two coordinate pairs.
    - The result is always >= 0 and symmetric in the two points.

    Args:
        x1, y1: Coordinates of the first point.
        x2, y2: Coordinates of the second point.

    Returns:
        Distance as a float, e.g. (0,0)-(0,1) -> 1.0 and
        (-5,0)-(10,-10) -> 18.027756377319946.
    """
    return float(distance.euclidean([x1, y1], [x2, y2]))


def get_linear_equation_root(a: float, b: float) -> int:
    """
    Solve a*x + b = 0 and round the root to the nearest integer.

    **Mathematical**: x = -b / a, rounded half away from zero.

    **Edge cases**:
    - a == 0 has no unique root; Python raises ZeroDivisionError and the
      error is left to the caller.
    - A root of -0.0 is returned as 0.

    Args:
        a: Coefficient of x (must be non-zero).
        b: Constant term.

    Returns:
        Integer root, e.g. (5, -10) -> 2, (1, 8) -> -8, (5, 0) -> 0.
    """
    root = -b / a
    return int(_round_half_away_from_zero(root))


def get_angle_between_vectors(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Compute the angle (in radians) between two vectors in the plane.

    **Conceptual**: The angle between two vectors depends only on their
    directions, not their lengths. Perpendicular vectors are pi/2 apart,
    opposite vectors pi apart and parallel vectors 0 apart.

    **Mathematical**:
        cos(theta) = (v1 . v2) / (|v1| * |v2|)
        sin(theta) = |v1 x v2| / (|v1| * |v2|)
        theta = arctan2(|v1 x v2|, v1 . v2), theta in [0, pi]

    **Functionally**:
    - Each vector is first divided by its largest absolute component, so the
      cross and dot products stay in range for components near 1e300 or 1e-300.
    - arctan2 of the cross and dot products gives the same angle as arccos of
      the normalised dot product without its loss of precision near 0 and pi.
      Parallel integer vectors come out as exactly 0 or pi.

    **Edge cases**:
    - If either vector has zero length the angle is undefined and the result is NaN.

    Args:
        x1, y1: Components of the first vector.
        x2, y2: Components of the second vector.

    Returns:
        Angle in radians in [0, pi], or NaN if a vector has zero magnitude.
    """
    first = np.array([x1, y1], dtype=float)
    second = np.array([x2, y2], dtype=float)

    first_scale = np.max(np.abs(first))
    second_scale = np.max(np.abs(second))
    if first_scale == 0 or second_scale == 0:
        return float(np.nan)

    first = first / first_scale
    second = second / second_scale

    cross_product = first[0] * second[1] - first[1] * second[0]
    dot_product = np.dot(first, second)
    return float(np.arctan2(abs(cross_product), dot_product))


def get_last_digit(value: int) -> int:
    """
    Return the last decimal digit of an integer.

    The sign is ignored (-37 -> 7), so the result is always in 0..9.

    Args:
        value: Integer value (may be negative).

    Returns:
        Last digit, e.g. 100 -> 0, 37 -> 7, 5 -> 5.
    """
    return abs(int(value)) % 10


def parse_number_from_string(value: str) -> float:
    """
    Parse a numeric literal from a string.

    **Functionally**:
    - Surrounding whitespace is ignored.
    - Integer, decimal, signed and exponent literals are accepted
      ('100' -> 100.0, '-525.5' -> -525.5, '1e3' -> 1000.0).
    - Parsing goes through pandas.to_numeric with errors="coerce", which
      turns anything that is not a numeric literal into NaN.

    **Edge cases**:
    - The empty (or whitespace-only) string is not a literal and yields NaN.
    - Non-string input yields NaN.

    Args:
        value: String to parse.

    Returns:
        Parsed value as a float, or NaN if the string is not a numeric literal.
    """
    if not isinstance(value, str):
        logger.debug("Cannot parse non-string value %r as a number", value)
        return float(np.nan)

    text = value.strip()
    if not text:
        return float(np.nan)

    parsed = float(pd.to_numeric(text, errors="coerce"))
    if np.isnan(parsed):
        logger.debug("String %r is not a numeric literal", value)
    return parsed


def get_parallelepiped_diagonal(a: float, b: float, c: float) -> float:
    """
    Compute the space diagonal of a rectangular parallelepiped with sides a, b, c.

    **Mathematical**: d = sqrt(a^2 + b^2 + c^2), the norm of (a, b, c).

    Args:
        a, b, c: Side lengths.

    Returns:
        Diagonal length, e.g. (1, 1, 1) -> 1.7320508075688772.
    """
    return float(np.linalg.norm([a, b, c]))


def round_to_power_of_ten(n: float, power: int, mode: str = HALF_AWAY_FROM_ZERO) -> float:
    """
    Round a number to the nearest multiple of 10**power.

    **Mathematical**: result = round(n / 10^power) * 10^power

    **Functionally**:
    - mode="half_away_from_zero" (default) sends ties away from zero:
      15 -> 20 and -15 -> -20 for power=1.
    - mode="half_up" sends ties toward +infinity: -15 -> -10 for power=1.
    - power=0 rounds to the nearest integer.
    - Rounding an already rounded value returns it unchanged.
    - Negative powers divide by the scale instead of multiplying by a
      fractional one, so 1.26 with power=-1 gives 1.3 and not 1.3000000000000003.

    Args:
        n: Value to round.
        power: Exponent of the power of ten to round to (normally >= 0).
        mode: Tie-breaking rule, one of ROUNDING_MODES.

    Returns:
        Rounded value as a float, e.g. (1234, 2) -> 1200.0, (1678, 2) -> 1700.0.

    Raises:
        ValueError: If mode is not one of ROUNDING_MODES.
    """
    try:
        rounder = _ROUNDERS[mode]
    except KeyError:
        raise ValueError(
            f"Unknown rounding mode: {mode!r} (expected one of {', '.join(ROUNDING_MODES)})"
        )

    if power >= 0:
        scale = 10.0 ** power
        return float(rounder(n / scale) * scale)

    scale = 10.0 ** -power
    return float(rounder(n * scale) / scale)


def is_prime(n: int) -> bool:
    """
    Test whether n is a prime number.

    **Mathematical**: n is prime iff n >= 2 and its only divisors are 1 and n.

    **Functionally**:
    - 2 and 3 are prime; anything below 2 or divisible by 2 or 3 is not.
    - Every remaining prime has the form 6k +/- 1, so trial division only
      checks i and i + 2 for i = 5, 11, 17, ... while i * i <= n.
    - Booleans and non-integral floats are never prime; integral floats
      such as 7.0 are tested as integers.

    Args:
        n: Integer to test.

    Returns:
        True if n is prime, False otherwise (4 -> False, 17 -> True).
    """
    if isinstance(n, (bool, np.bool_)):
        return False
    if not isinstance(n, numbers.Integral):
        if not float(n).is_integer():
            return False
    n = int(n)

    if n in (2, 3):
        return True
    if n <= 1 or n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


@singledispatch
def to_number_or_default(value: Any, default: Any) -> Any:
    """
    Coerce a value to a base-10 integer, or return a default on failure.

    One rule per input kind:
      - None and booleans -> default
      - integers (including numpy integers) -> the integer itself
      - other real numbers -> truncated toward zero, default if NaN or infinite
      - strings -> the leading integer prefix ('12px' -> 12, '1.9' -> 1),
        default if the string does not start with digits
      - anything else -> its str() form, coerced by the string rule

    Args:
        value: Value to coerce.
        default: Value returned when coercion fails.

    Returns:
        The coerced int, or default.
    """
    return _coerce_text(str(value), default)


@to_number_or_default.register(type(None))
def _coerce_none(value, default):
    return default


@to_number_or_default.register(bool)
def _coerce_bool(value, default):
    logger.debug("Boolean %r is not a number, using default %r", value, default)
    return default


@to_number_or_default.register(numbers.Integral)
def _coerce_integral(value, default):
    return int(value)


@to_number_or_default.register(numbers.Real)
def _coerce_real(value, default):
    if not np.isfinite(float(value)):
        logger.debug("Non-finite value %r, using default %r", value, default)
        return default
    return int(value)


@to_number_or_default.register(Decimal)
def _coerce_decimal(value, default):
    if not value.is_finite():
        logger.debug("Non-finite value %r, using default %r", value, default)
        return default
    return int(value)


@to_number_or_default.register(str)
def _coerce_str(value, default):
    return _coerce_text(value, default)


def _coerce_text(text: str, default: Any) -> Any:
    match = _LEADING_INTEGER.match(text)
    if match is None:
        logger.debug("No leading integer in %r, using default %r", text, default)
        return default
    return int(match.group(1))
