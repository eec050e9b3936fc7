"""Validators for callables."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .validator import Validator, allow, wrap


def is_() -> Validator[Any, Callable[..., Any]]:
    """Check that the value is callable."""
    return wrap("func.is", allow(callable, "value is not a function"))
