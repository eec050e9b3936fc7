"""Validators for mappings.

``keys`` lives in ``aggregators`` and is re-exported here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .aggregators import keys
from .errors import KeyedReasons, ValidationError
from .validator import MISSING, Validator, allow, is_absent, transform, wrap


def is_() -> Validator[Any, Mapping]:
    """Check that the value is a mapping.

    Use ``isplain`` for untrusted input such as request bodies.
    """
    return wrap("obj.is", allow(lambda value: isinstance(value, Mapping), "value is not an object type"))


def isplain() -> Validator[Any, dict]:
    """Check that the value is exactly a ``dict``.

    Subclasses of ``dict`` and other mapping types are rejected, so
    overridden lookup or iteration behavior cannot reach later validators.
    """
    return wrap(
        "obj.isplain",
        allow(
            lambda value: type(value) is dict,
            "value is not a plain dict",
        ),
    )


def defaults(defaults: Mapping[str, Any]) -> Validator[Mapping, dict]:
    """Fill in missing keys from ``defaults``. Always returns a new dict."""
    defaults = dict(defaults)

    def fill(value: Mapping[str, Any]) -> dict[str, Any]:
        output = dict(defaults)
        output.update(value)
        return output

    return wrap("obj.defaults", transform(fill))


def xor(fields: Sequence[str]) -> Validator[Mapping, Mapping]:
    """Allow exactly one of ``fields`` to be present.

    Presence does not mean the value is not None.
    """
    fields = tuple(fields)

    def exactly_one(value: Any) -> bool:
        return isinstance(value, Mapping) and sum(1 for field in fields if field in value) == 1

    return wrap(
        "obj.xor",
        allow(exactly_one, f"value must have only one field present of {', '.join(fields)}"),
    )


def all_keys(fields: Sequence[str]) -> Validator[Mapping, Mapping]:
    """Require every one of ``fields`` to be present.

    Presence does not mean the value is not None. Missing fields are
    reported as keyed reasons.
    """
    fields = tuple(fields)

    def all_present(value: Any) -> Any:
        if is_absent(value):
            return value

        present = value if isinstance(value, Mapping) else {}
        reasons = {
            field: ValidationError("field must be present", MISSING)
            for field in fields
            if field not in present
        }

        if reasons:
            raise ValidationError(
                f"value must contain all of the fields {', '.join(fields)}",
                value,
                KeyedReasons(reasons),
            )

        return value

    return wrap("obj.and", all_present)


__all__ = [
    "all_keys",
    "defaults",
    "is_",
    "isplain",
    "keys",
    "xor",
]
