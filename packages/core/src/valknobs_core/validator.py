"""The validator primitive and the leaf constructors.

A validator is a callable that returns its (possibly transformed) input, or
raises ``ValidationError`` when the input does not match its output type.
Validators obey these rules:

1. Absent values (``None`` and ``MISSING``) pass through unchanged, unless the
   validator exists to reject them (``required``).
2. A value that is not expected always raises ``ValidationError``.
3. Any other exception signals a defect and is raised as early as possible.
4. The returned value is the validated value, possibly transformed.

Rule 1 is enforced in exactly one place: ``allow`` and ``transform``. Every
leaf validator is built as ``wrap(name, allow(...))`` or
``wrap(name, transform(...))``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .errors import ValidationError

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741
N = TypeVar("N")


class _Missing:
    """Marker for a value that is not there at all, as opposed to None."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def is_absent(value: Any) -> bool:
    """Return True for ``None`` and ``MISSING``."""
    return value is None or value is MISSING


class Validator(Generic[I, O]):
    """A reusable, immutable validation and transformation rule.

    Validators are created once and called any number of times. The name is
    for debugging only and never changes behavior.

    Example:
        ```python
        username = required().and_(strings.is_()).and_(strings.min(3))
        username("bob")  # 'bob'
        username(None)   # raises ValidationError
        ```
    """

    __slots__ = ("_name", "_func")

    def __init__(self, name: str, func: Callable[[I], O]):
        self._name = name
        self._func = func

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, value: I) -> O:
        return self._func(value)

    def and_(self, validator: Callable[[O], N]) -> Validator[I, N]:
        """Chain another validator after this one.

        The output of this validator is the input of ``validator``. If this
        validator raises, ``validator`` is not called and the exception
        propagates unchanged.

        Args:
            validator: Validator applied to this validator's output

        Returns:
            A new validator performing both steps in order
        """
        first = self._func

        def chained(value: I) -> N:
            return validator(first(value))

        return Validator(f"{self._name}.and({_name_of(validator)})", chained)

    def __and__(self, other: Any) -> Validator[I, Any]:
        """Combine with ``&``: same as ``and_``."""
        if not callable(other):
            return NotImplemented
        return self.and_(other)

    def __setattr__(self, key: str, value: Any) -> None:
        if hasattr(self, "_func"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, key, value)

    def __repr__(self) -> str:
        return f"<Validator {self._name}>"


def _name_of(validator: Callable[..., Any]) -> str:
    if isinstance(validator, Validator):
        return validator.name
    return getattr(validator, "__name__", repr(validator))


def wrap(name: str, func: Callable[[I], O]) -> Validator[I, O]:
    """Wrap a validation function as a ``Validator``.

    The function should let absent values through and raise
    ``ValidationError`` for unexpected ones. It may raise other exceptions,
    which stop any enclosing validation immediately. ``wrap`` itself does no
    filtering; use ``allow`` or ``transform`` to build the function.

    Args:
        name: Debugging name of the validator
        func: The validation function

    Returns:
        Validator calling ``func``
    """
    return Validator(name, func)


def allow(predicate: Callable[[Any], bool], failure: str) -> Callable[[Any], Any]:
    """Turn a boolean check into a validation function ready for ``wrap``.

    Absent values are returned without calling ``predicate``. Values for which
    ``predicate`` is true are returned unchanged; all others raise
    ``ValidationError(failure, value)``.

    Args:
        predicate: The boolean check
        failure: Message of the raised ValidationError

    Returns:
        Validation function ready to use in ``wrap``
    """

    def allowed(value: Any) -> Any:
        if is_absent(value) or predicate(value):
            return value

        raise ValidationError(failure, value)

    return allowed


def transform(transformer: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Turn a transformation into a validation function ready for ``wrap``.

    Absent values are returned without calling ``transformer``. The
    transformer may raise ``ValidationError`` when the value turns out not to
    be convertible; any other exception propagates as is.

    Args:
        transformer: The transformation function

    Returns:
        Validation function ready to use in ``wrap``
    """

    def transformed(value: Any) -> Any:
        if is_absent(value):
            return value

        return transformer(value)

    return transformed


def _required(value: Any) -> Any:
    if is_absent(value):
        raise ValidationError("value is null or undefined", value)

    return value


def required() -> Validator[Any, Any]:
    """Validator rejecting ``None`` and ``MISSING``. Usually starts a chain."""
    return wrap("required", _required)


def optional() -> Validator[Any, Any]:
    """Validator accepting every value, absent ones included."""
    return wrap("optional", lambda value: value)


__all__ = [
    "MISSING",
    "Validator",
    "allow",
    "is_absent",
    "optional",
    "required",
    "transform",
    "wrap",
]
