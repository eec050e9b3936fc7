"""Validators for ``datetime`` values."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from .errors import ValidationError
from .validator import Validator, allow, transform, wrap

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_() -> Validator[Any, datetime]:
    """Check that the value is a ``datetime``."""
    return wrap(
        "date.is",
        allow(lambda value: isinstance(value, datetime), "value is not a date or valid date"),
    )


def _from_iso(value: str) -> datetime:
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError("value is not a date or valid date", value) from None


def parse() -> Validator[str, datetime]:
    """Parse an ISO 8601 string into a ``datetime``. A trailing ``Z`` means UTC.

    Accepts the formats of ``datetime.fromisoformat`` on Python 3.11+,
    including the basic format (``20200102T030405``) and week dates.
    """
    return wrap("date.parse", transform(_from_iso)).and_(is_())


def _from_epoch(scale: int):
    def convert(value: float) -> datetime:
        try:
            return EPOCH + timedelta(milliseconds=value * scale)
        except (ValueError, OverflowError):
            raise ValidationError("value is not a date or valid date", value) from None

    return convert


def milliseconds() -> Validator[float, datetime]:
    """Transform UNIX milliseconds into a UTC ``datetime``."""
    return wrap("date.milliseconds", transform(_from_epoch(1))).and_(is_())


def seconds() -> Validator[float, datetime]:
    """Transform UNIX seconds into a UTC ``datetime``."""
    return wrap("date.seconds", transform(_from_epoch(1000))).and_(is_())
