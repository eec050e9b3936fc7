"""Validators for values of any type."""

from __future__ import annotations

from typing import Any

from .validator import Validator, allow, transform, wrap


def is_() -> Validator[Any, Any]:
    """Accept any value."""
    return wrap("any.is", transform(lambda value: value))


def instance(cls: type | tuple[type, ...]) -> Validator[Any, Any]:
    """Check that the value is an instance of ``cls``."""
    return wrap(
        "any.instance",
        allow(lambda value: isinstance(value, cls), f"value not an instance of {cls}"),
    )


def only(*allowed: Any) -> Validator[Any, Any]:
    """Check that the value is one of ``allowed``.

    Values match when they are equal and of the same type, so ``1`` does not
    match ``True`` and ``1.0`` does not match ``1``.
    """

    def is_allowed(value: Any) -> bool:
        return any(type(value) is type(option) and value == option for option in allowed)

    return wrap(
        "any.only",
        allow(is_allowed, f"value is not one of {', '.join(str(option) for option in allowed)}"),
    )


values = only
