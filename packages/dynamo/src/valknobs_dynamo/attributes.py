"""Decoders for DynamoDB attribute values.

DynamoDB wraps every value in a single-key mapping whose key tags the type:

    Strings:     {"S": "value"}
    String Sets: {"SS": ["value", ...]}
    Numbers:     {"N": "1.5"}            (numbers travel as strings)
    Number Sets: {"NS": ["1", "2", ...]}
    Booleans:    {"BOOL": True}
    Null:        {"NULL": True}
    Binary:      {"B": "base64 text"}
    Binary Sets: {"BS": ["base64 text", ...]}
    Lists:       {"L": [attribute value, ...]}
    Maps:        {"M": {"name": attribute value, ...}}

Each ``AttributeType`` decodes one tag into a plain Python value and lets
``{"NULL": True}`` through as ``None``. Further validators can be chained on
top, e.g. ``NUMBER.is_().and_(parse_number())``.
"""

from __future__ import annotations

import base64
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, NewType

from valknobs_core import (
    PositionalReasons,
    ValidationError,
    Validator,
    arrays,
    booleans,
    numbers,
    objects,
    required,
    strings,
    transform,
    wrap,
)
from valknobs_extras import strings as extra_strings

DynamoNumber = NewType("DynamoNumber", str)
"""A number kept in DynamoDB's string form, to be parsed deliberately."""

TAGS = ("S", "SS", "N", "NS", "BOOL", "NULL", "B", "BS", "L", "M")

_NUMBER_FORMAT = r"^(?:0|0\.0|-?0\.[0-9]*[1-9]|-?[1-9][0-9]*(?:\.[0-9]*[1-9])?)\Z"


def _is_null_marker(value: Any) -> bool:
    return isinstance(value, Mapping) and len(value) == 1 and value.get("NULL", False) is True


def nullable() -> Validator[Any, Any]:
    """Transform ``{"NULL": True}`` into ``None``, leaving anything else unchanged."""
    return wrap(
        "dynamo.nullable",
        transform(lambda value: None if _is_null_marker(value) else value),
    )


def single_tag() -> Validator[Any, Mapping]:
    """Check that exactly one attribute type tag is present."""
    return objects.xor(TAGS)


def isnull() -> Validator[Any, None]:
    """Decode ``{"NULL": True}`` into ``None``, rejecting every other attribute value."""
    return (
        objects.is_()
        .and_(single_tag())
        .and_(objects.keys({"NULL": required().and_(booleans.truth())}))
        .and_(wrap("dynamo.null", transform(lambda value: None)))
    )


def number_format() -> Validator[str, str]:
    """Check DynamoDB's canonical number formatting.

    Accepted: ``0``, ``0.0``, and (possibly negative) decimals without
    leading zeros in the integral part or trailing zeros in the fraction.
    """
    return strings.regex(_NUMBER_FORMAT)


def parse_number(throw_on_nan: bool = False) -> Validator[DynamoNumber, float]:
    """Parse a ``DynamoNumber`` into ``int`` or ``float``.

    Floats cannot represent every DynamoDB number exactly; keep the string
    form when full precision matters.
    """
    return numbers.parse(throw_on_nan=throw_on_nan)


def proper_keys() -> Validator[Mapping, Mapping]:
    """Check that every key of a map attribute is a non-empty string."""

    def check(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
        names = list(value.keys())
        reasons: list[ValidationError | None] = [None] * len(names)
        has_error = False

        for index, name in enumerate(names):
            if not isinstance(name, str) or not name:
                has_error = True
                reasons[index] = ValidationError(
                    f"key at position {index} with name '{name}' is not a string or is empty",
                    name,
                )

        if has_error:
            raise ValidationError("map has improper keys", value, PositionalReasons(reasons))

        return value

    return wrap("dynamo.map.properKeys", transform(check))


def _identity(value: Any) -> Any:
    return value


def _decode_base64(value: str) -> bytes:
    return base64.b64decode(value, validate=True)


@dataclass(frozen=True)
class AttributeType:
    """One DynamoDB attribute type.

    Attributes:
        tag: The type tag, e.g. "S"
        value: Builds the validator for the tagged value
        convert: Turns the validated tagged value into the decoded value
        plain: Require a plain dict rather than any mapping
    """

    tag: str
    value: Callable[[], Validator[Any, Any]] = field(repr=False)
    convert: Callable[[Any], Any] = field(default=_identity, repr=False)
    plain: bool = True

    def pick(self) -> Validator[Mapping, Any]:
        """Pick and convert the tagged value. Usually ``is_()`` is what you want."""
        tag = self.tag
        convert = self.convert
        return wrap(f"dynamo.{tag.lower()}", transform(lambda value: convert(value[tag])))

    def is_(self) -> Validator[Any, Any]:
        """Decode either ``{"NULL": True}`` or this attribute type."""
        container = objects.isplain() if self.plain else objects.is_()
        return (
            nullable()
            .and_(container)
            .and_(single_tag())
            .and_(objects.keys({self.tag: self.value()}))
            .and_(self.pick())
        )


def _string_value() -> Validator[Any, str]:
    return required().and_(strings.is_())


def _number_value() -> Validator[Any, str]:
    return required().and_(strings.is_()).and_(number_format())


def _base64_value() -> Validator[Any, str]:
    return required().and_(strings.is_()).and_(extra_strings.is_base64("rfc4648"))


def _set_of(item: Callable[[], Validator[Any, Any]]) -> Callable[[], Validator[Any, list]]:
    def build() -> Validator[Any, list]:
        return required().and_(arrays.is_()).and_(arrays.min(1)).and_(arrays.items(item()))

    return build


STRING = AttributeType("S", _string_value, plain=False)
STRING_SET = AttributeType("SS", _set_of(_string_value), plain=False)
NUMBER = AttributeType("N", _number_value, convert=DynamoNumber)
NUMBER_SET = AttributeType("NS", _set_of(_number_value), convert=lambda value: [DynamoNumber(n) for n in value])
BOOLEAN = AttributeType("BOOL", lambda: required().and_(booleans.is_()))
BINARY = AttributeType("B", _base64_value, convert=_decode_base64)
BINARY_SET = AttributeType("BS", _set_of(_base64_value), convert=lambda value: [_decode_base64(b) for b in value])
LIST = AttributeType("L", lambda: required().and_(arrays.is_()))
MAP = AttributeType("M", lambda: required().and_(objects.is_()).and_(proper_keys()))


__all__ = [
    "AttributeType",
    "BINARY",
    "BINARY_SET",
    "BOOLEAN",
    "DynamoNumber",
    "LIST",
    "MAP",
    "NUMBER",
    "NUMBER_SET",
    "STRING",
    "STRING_SET",
    "TAGS",
    "isnull",
    "nullable",
    "number_format",
    "parse_number",
    "proper_keys",
    "single_tag",
]
