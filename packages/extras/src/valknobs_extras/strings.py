"""Extra string validators built on valknobs_core.

All validators here expect a ``str`` input, so chain them after
``valknobs_core.strings.is_()``.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import SplitResult, urlsplit

from email_validator import EmailNotValidError, validate_email

from valknobs_core import ValidationError, Validator, allow, transform, wrap

_GUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-([0-9a-f])[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
_NIL_GUID = re.compile(r"^[0-]{36}$")
_HOSTNAME = re.compile(r"^[a-z0-9-]+(\.[a-z0-9-]+)+$")
_PHONE_NUMBER = re.compile(r"^\+?[1-9]([0-9]{3,14}|[0-9]{2,14}|[0-9]{1,14})$")

_BASE64 = {
    "rfc4648": re.compile(r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?$"),
    "rfc4648-url": re.compile(r"^(?:[A-Za-z0-9_-]{4})*(?:[A-Za-z0-9_-]{2}==|[A-Za-z0-9_-]{3}=)?$"),
}


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def email() -> Validator[str, str]:
    """Check that the value is an email address. Only the syntax is checked."""
    return wrap("str.email", allow(_is_email, "value is not an email"))


def _split_url(value: str) -> SplitResult:
    try:
        parts = urlsplit(value)
        # port is parsed lazily and raises for non-numeric or out of range ports
        parts.port
    except ValueError:
        raise ValidationError("Not a valid URL", value) from None

    if not parts.scheme or not parts.netloc:
        raise ValidationError("Not a valid URL", value)

    return parts


def url(protocol: str | None = None, port: int | str | None = None) -> Validator[str, SplitResult]:
    """Parse the value as an absolute URL.

    Args:
        protocol: Required scheme, with or without the trailing colon
        port: Required explicit port

    Returns:
        Validator transforming strings into ``urllib.parse.SplitResult``
    """
    scheme = protocol.rstrip(":").lower() if protocol else None

    def parse(value: str) -> SplitResult:
        parts = _split_url(value)

        if port is not None and str(port) != str(parts.port):
            raise ValidationError(f"Invalid port: {port}", value)

        if scheme is not None and scheme != parts.scheme.lower():
            raise ValidationError(f"Invalid protocol: {protocol}", value)

        return parts

    return wrap("str.url", transform(parse))


def url_as_string() -> Validator[str, str]:
    """Check that the value is an absolute URL, keeping it as a string."""

    def check(value: str) -> str:
        _split_url(value)
        return value

    return wrap("str.urlAsString", transform(check))


def guid(version: int | None = None, allow_nil: bool = False) -> Validator[str, str]:
    """Check that the value is a GUID.

    Any version is accepted unless ``version`` is given. The nil GUID
    ``00000000-0000-0000-0000-000000000000`` is rejected unless ``allow_nil``.
    """

    def is_guid(value: str) -> bool:
        match = _GUID.fullmatch(value)
        if not match:
            return False

        found = int(match.group(1), 16)
        if found == 0:
            return allow_nil and bool(_NIL_GUID.fullmatch(value))

        return version is None or version == found

    failure = "value is not a uuid"
    if version:
        failure += f" version {version}"
    if allow_nil:
        failure += " or nil"

    return wrap("str.guid", allow(is_guid, failure))


def hostname() -> Validator[str, str]:
    """Check that the value is a lowercase dotted hostname."""
    return wrap("str.hostname", allow(lambda value: bool(_HOSTNAME.fullmatch(value)), "value is not a hostname"))


def starts_with(start: str) -> Validator[str, str]:
    return wrap(
        "str.startsWith",
        allow(lambda value: value.startswith(start), f"value does not start with: {start}"),
    )


def ends_with(end: str) -> Validator[str, str]:
    return wrap(
        "str.endsWith",
        allow(lambda value: value.endswith(end), f"value does not end with: {end}"),
    )


def contains(part: str) -> Validator[str, str]:
    return wrap(
        "str.contains",
        allow(lambda value: part in value, f"value does not contain: {part}"),
    )


def lowercase() -> Validator[str, str]:
    return wrap("str.lowercase", transform(str.lower))


def uppercase() -> Validator[str, str]:
    return wrap("str.uppercase", transform(str.upper))


def trim() -> Validator[str, str]:
    return wrap("str.trim", transform(str.strip))


def phone_number() -> Validator[str, str]:
    """Check that the value is an E.164 phone number, e.g. ``+14155552671``."""
    return wrap(
        "str.phoneNumber",
        allow(lambda value: bool(_PHONE_NUMBER.fullmatch(value)), "value does not match E.164 numbering plan"),
    )


def is_base64(variant: str = "rfc4648") -> Validator[str, str]:
    """Check that the value is padded base64 text.

    Args:
        variant: ``"rfc4648"`` for the standard alphabet or ``"rfc4648-url"``
            for the URL and filename safe alphabet

    Returns:
        Validator for base64 strings

    Raises:
        ValueError: If the variant is unknown
    """
    if variant not in _BASE64:
        raise ValueError(f"Unknown base64 variant: {variant}")

    pattern = _BASE64[variant]

    def is_encoded(value: Any) -> bool:
        return bool(pattern.fullmatch(value))

    return wrap("str.isbase64", allow(is_encoded, f"value is not base64 ({variant})"))
