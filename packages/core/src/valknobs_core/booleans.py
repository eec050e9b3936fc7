"""Validators for ``bool`` values."""

from __future__ import annotations

from typing import Any

from .validator import Validator, allow, transform, wrap


def is_() -> Validator[Any, bool]:
    """Check that the value is a ``bool``. Non-bool values are rejected."""
    return wrap("bool.is", allow(lambda value: isinstance(value, bool), "value is not a boolean"))


def truth() -> Validator[Any, bool]:
    """Check that the value is exactly ``True``."""
    return wrap("bool.truth", allow(lambda value: value is True, "value is not true"))


def falseness() -> Validator[Any, bool]:
    """Check that the value is exactly ``False``."""
    return wrap("bool.falseness", allow(lambda value: value is False, "value is not false"))


def truthy() -> Validator[Any, bool]:
    """Transform any value into its truth value."""
    return wrap("bool.truthy", transform(bool))


def falsy() -> Validator[Any, bool]:
    """Transform any value into the negation of its truth value."""
    return wrap("bool.falsy", transform(lambda value: not value))
