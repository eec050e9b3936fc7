"""Validators for ``str`` values."""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Any

from .errors import ValidationError
from .validator import Validator, allow, transform, wrap


def is_() -> Validator[Any, str]:
    """Check that the value is a ``str``. Empty strings are accepted."""
    return wrap("str.is", allow(lambda value: isinstance(value, str), "value is not string"))


def nonempty() -> Validator[Any, str]:
    """Check that the value is a non-empty ``str``."""
    return wrap(
        "str.nonempty",
        allow(lambda value: isinstance(value, str) and value != "", "value is not a non-empty string"),
    )


def min(min: int) -> Validator[str, str]:  # noqa: A001
    """Check that the string has at least ``min`` characters."""
    return wrap("str.min", allow(lambda value: len(value) >= min, f"value.length is lower than {min}"))


def max(max: int) -> Validator[str, str]:  # noqa: A001
    """Check that the string has at most ``max`` characters."""
    return wrap("str.max", allow(lambda value: len(value) <= max, f"value.length is greater than {max}"))


def length(min: int, max: int) -> Validator[str, str]:
    """Check that the string length is in the closed range ``[min, max]``."""
    return wrap(
        "str.length",
        allow(
            lambda value: min <= len(value) <= max,
            f"value.length is out of bounds [{min}, {max}]",
        ),
    )


def regex(pattern: str | RegexPattern[str], replace: str | None = None) -> Validator[str, str]:
    """Check that the string matches a pattern, optionally rewriting it.

    The pattern is searched for anywhere in the string; anchor it to match
    the whole value. With ``replace``, the first match is substituted the way
    ``re.sub`` does, with ``\\1`` style group references. If the pattern does
    not match, no replacement is attempted and the value is rejected.

    Args:
        pattern: Regex pattern (string or compiled pattern)
        replace: Optional replacement for the matching pattern

    Returns:
        Validator for strings
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def match(value: str) -> str:
        if not compiled.search(value):
            raise ValidationError(f"value does not match {compiled.pattern}", value)

        if replace is not None:
            return compiled.sub(replace, value, count=1)

        return value

    return wrap("str.regex", transform(match))
