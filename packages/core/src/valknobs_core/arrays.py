"""Validators for ``list`` values.

``items`` lives in ``aggregators`` and is re-exported here so that array
checks read as one namespace: ``arrays.is_().and_(arrays.items(...))``.
"""

from __future__ import annotations

from typing import Any

from .aggregators import items
from .validator import Validator, allow, wrap


def is_() -> Validator[Any, list]:
    """Check that the value is a ``list``."""
    return wrap("array.is", allow(lambda value: isinstance(value, list), "value is not an array"))


def min(min: int) -> Validator[list, list]:  # noqa: A001
    """Check that the list has at least ``min`` elements."""
    return wrap("array.min", allow(lambda value: len(value) >= min, f"value.length is smaller than {min}"))


def max(max: int) -> Validator[list, list]:  # noqa: A001
    """Check that the list has at most ``max`` elements."""
    return wrap("array.max", allow(lambda value: len(value) <= max, f"value.length is greater than {max}"))


def length(min: int, max: int) -> Validator[list, list]:
    """Check that the list length is in the closed range ``[min, max]``."""
    return wrap(
        "array.length",
        allow(
            lambda value: min <= len(value) <= max,
            f"value.length is out of bounds [{min}, {max}]",
        ),
    )


__all__ = [
    "is_",
    "items",
    "length",
    "max",
    "min",
]
