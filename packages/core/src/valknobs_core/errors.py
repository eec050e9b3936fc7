"""Validation failure type and its reason tree.

A ``ValidationError`` is raised by a validator whose input does not match its
output type. When the failure comes from an aggregator whose children failed,
``reasons`` holds the child failures:

- ``PositionalReasons`` when the failing value is a sequence. It has the same
  length as the sequence, with ``None`` at every index that passed.
- ``KeyedReasons`` when the failing value is a mapping. It holds an entry only
  for the keys that failed.

Which of the two is used is fixed when the error is constructed, so consumers
branch on ``error.kind`` instead of inspecting the shape of ``reasons``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Union

from valknobs_common.exceptions import ValknobsError


class PositionalReasons(Sequence):
    """Per-index failures of a sequence, ``None`` where the element passed."""

    kind = "positional"

    __slots__ = ("_errors",)

    def __init__(self, errors: Sequence[ValidationError | None]):
        self._errors = tuple(errors)

    def __getitem__(self, index):  # type: ignore[override]
        return self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def failures(self) -> Iterator[tuple[int, ValidationError]]:
        """Iterate ``(index, error)`` pairs for the indices that failed."""
        for index, error in enumerate(self._errors):
            if error is not None:
                yield index, error

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PositionalReasons):
            return self._errors == other._errors
        return NotImplemented

    def __repr__(self) -> str:
        return f"PositionalReasons({list(self._errors)!r})"


class KeyedReasons(Mapping):
    """Per-key failures of a mapping, present only for keys that failed."""

    kind = "keyed"

    __slots__ = ("_errors",)

    def __init__(self, errors: Mapping[Any, ValidationError]):
        self._errors = MappingProxyType(dict(errors))

    def __getitem__(self, key: Any) -> ValidationError:
        return self._errors[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def failures(self) -> Iterator[tuple[Any, ValidationError]]:
        """Iterate ``(key, error)`` pairs in the order the keys were checked."""
        yield from self._errors.items()

    def __repr__(self) -> str:
        return f"KeyedReasons({dict(self._errors)!r})"


Reasons = Union[PositionalReasons, KeyedReasons]


class ValidationError(ValknobsError):
    """Raised when a value does not match the output type of a validator.

    Attributes:
        message: The failure message, also ``str(error)``
        value: The exact value that failed validation
        reasons: The child failures when an aggregator rejected the value,
            otherwise None

    Args:
        message: Human-readable failure message
        value: The value that failed validation
        reasons: Child failures. A list or tuple is taken as positional
            reasons, a dict as keyed reasons.

    Example:
        ```python
        try:
            validator(payload)
        except ValidationError as e:
            for key, reason in e.reasons.failures():
                print(key, reason.message)
        ```
    """

    def __init__(
        self,
        message: str,
        value: Any,
        reasons: Reasons | Sequence[ValidationError | None] | Mapping[Any, ValidationError] | None = None,
    ):
        super().__init__(message, context={"value": value})
        self.message = message
        self.value = value
        self.reasons: Reasons | None = _as_reasons(reasons)

    @property
    def kind(self) -> str | None:
        """``"positional"``, ``"keyed"`` or None when there are no reasons."""
        if self.reasons is None:
            return None
        return self.reasons.kind

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r}, {self.value!r}, reasons={self.reasons!r})"


def _as_reasons(reasons: Any) -> Reasons | None:
    if reasons is None or isinstance(reasons, (PositionalReasons, KeyedReasons)):
        return reasons
    if isinstance(reasons, Mapping):
        return KeyedReasons(reasons)
    return PositionalReasons(reasons)


__all__ = [
    "KeyedReasons",
    "PositionalReasons",
    "Reasons",
    "ValidationError",
]
