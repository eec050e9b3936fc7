"""Structural validators recursing into sequences and mappings.

Both aggregators attempt every element or key, collecting each child's
``ValidationError`` instead of stopping at the first one, and raise a single
``ValidationError`` whose ``reasons`` mirror the shape of the input. Any other
exception raised by a child aborts the aggregation at once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from itertools import islice
from typing import Any

from .errors import KeyedReasons, PositionalReasons, ValidationError
from .validator import MISSING, Validator, _name_of, is_absent, wrap

logger = logging.getLogger(__name__)


def items(item: Validator[Any, Any]) -> Validator[Any, Any]:
    """Validate every element of a sequence with an item-level validator.

    Every element is validated before anything is raised. If any element
    fails, the raised ``ValidationError`` carries ``PositionalReasons`` with
    the same length as the input. If the item validator returns every element
    unchanged (by identity), the input sequence itself is returned; otherwise
    a new list holding the validated elements is returned.

    Args:
        item: The item-level validator

    Returns:
        Validator for sequences of items
    """
    name = _name_of(item)

    def validate_items(value: Any) -> Any:
        if is_absent(value):
            return value

        output: list[Any] | None = None
        reasons: list[ValidationError | None] | None = None

        for index, element in enumerate(value):
            try:
                validated = item(element)
            except ValidationError as error:
                if reasons is None:
                    reasons = [None] * len(value)
                reasons[index] = error
                continue

            if validated is not element and output is None:
                output = list(islice(value, index))

            if output is not None:
                output.append(validated)

        if reasons is not None:
            if logger.isEnabledFor(logging.DEBUG):
                failed = sum(1 for reason in reasons if reason is not None)
                logger.debug(f"{name}: {failed} of {len(value)} items failed validation")
            raise ValidationError(
                "value is an array of invalid items", value, PositionalReasons(reasons)
            )

        if output is not None:
            return output

        return value

    return wrap(f"array.items({name})", validate_items)


def keys(
    structure: Mapping[str, Validator[Any, Any]],
    missing: Iterable[str] = (),
) -> Validator[Any, Any]:
    """Validate a mapping against a fixed structure of per-key validators.

    Every declared key must be present on the value and pass its validator.
    Keys listed in ``missing`` may be absent; their validator is then called
    with ``MISSING`` so that a ``required()`` validator still rejects them.
    Keys of the value that are not declared are ignored and not copied.

    The value is never returned as is: a new dict with the validated values
    of the declared keys is always built. A key whose validated value is
    ``MISSING`` is left out of it.

    Args:
        structure: Mapping of key to the validator of its value
        missing: Keys allowed to be absent from the value

    Returns:
        Validator for mappings of the given structure
    """
    structure = dict(structure)
    allowed_missing = frozenset(missing)

    def validate_keys(value: Any) -> Any:
        if is_absent(value):
            return value

        present = value if isinstance(value, Mapping) else {}
        output: dict[str, Any] = {}
        reasons: dict[str, ValidationError] | None = None

        for key, validator in structure.items():
            try:
                if key in present:
                    validated = validator(present[key])
                elif key in allowed_missing:
                    validated = validator(MISSING)
                else:
                    raise ValidationError(f"key {key} in value is missing", key)
            except ValidationError as error:
                if reasons is None:
                    reasons = {}
                reasons[key] = error
                continue

            if validated is not MISSING:
                output[key] = validated

        if reasons is not None:
            logger.debug(f"{len(reasons)} of {len(structure)} keys failed validation: {list(reasons)}")
            raise ValidationError("value does not match structure", value, KeyedReasons(reasons))

        return output

    return wrap("obj.keys", validate_keys)


__all__ = [
    "items",
    "keys",
]
