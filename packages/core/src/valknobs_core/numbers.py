"""Validators for numeric values.

Numbers are ``int`` and ``float`` values. ``bool`` is deliberately not a
number here, even though it subclasses ``int``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any

from .validator import Validator, allow, transform, wrap


def _is_number_type(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_() -> Validator[Any, float]:
    """Check that the value is a number other than NaN.

    See ``is_nan`` to accept NaN as well.
    """
    return wrap(
        "num.is",
        allow(
            lambda value: _is_number_type(value) and not (isinstance(value, float) and math.isnan(value)),
            "value is not a number",
        ),
    )


def is_nan() -> Validator[Any, float]:
    """Check that the value is a number, NaN included."""
    return wrap("num.isNaN", allow(_is_number_type, "value is not a number type"))


def is_integer() -> Validator[Any, int]:
    """Check that the value is an integral number (``2`` or ``2.0``)."""
    return wrap(
        "num.isInteger",
        allow(
            lambda value: _is_number_type(value)
            and (isinstance(value, int) or value.is_integer()),
            "value is not an integer",
        ),
    )


_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)
_INFINITY = re.compile(r"[+-]?(?:inf|infinity)", re.IGNORECASE)


def parse_number(value: Any) -> float:
    """Parse a numeric string as ``int`` when integral, else ``float``.

    Only plain ASCII decimal notation is understood: digit separators
    (``"1_000"``) and non-ASCII digits parse to NaN, as do all other strings
    that are not numbers. Surrounding whitespace is ignored. Numbers are
    returned as they are.
    """
    if _is_number_type(value):
        return value

    if not isinstance(value, str):
        return math.nan

    text = value.strip()

    if _INTEGER.fullmatch(text):
        return int(text)

    if _DECIMAL.fullmatch(text) or _INFINITY.fullmatch(text):
        return float(text)

    return math.nan


def parse(
    throw_on_nan: bool = False,
    parser: Callable[[str], float] | None = None,
) -> Validator[str, float]:
    """Transform a numeric string into a number.

    Unparseable strings become NaN, unless ``throw_on_nan`` is set, in which
    case they are rejected.

    Args:
        throw_on_nan: Reject values that parse to NaN
        parser: Parsing function, ``parse_number`` by default

    Returns:
        Validator for numeric strings
    """
    parsed = wrap("num.parse", transform(parser or parse_number))

    if throw_on_nan:
        return parsed.and_(is_())

    return parsed


def min(min: float) -> Validator[float, float]:  # noqa: A001
    """Check that the number is at least ``min``. NaN fails."""
    return wrap("num.min", allow(lambda value: value >= min, f"value is less than {min}"))


def max(max: float) -> Validator[float, float]:  # noqa: A001
    """Check that the number is at most ``max``. NaN fails."""
    return wrap("num.max", allow(lambda value: value <= max, f"value is greater than {max}"))


def _truncate(value: float) -> float:
    if isinstance(value, int):
        return value

    if math.isnan(value) or math.isinf(value):
        return value

    return math.trunc(value)


def integer() -> Validator[float, int]:
    """Transform a number into an integer by truncating toward zero.

    Integers are returned as they are; NaN and infinities are left unchanged.
    """
    return wrap("num.integer", transform(_truncate))
