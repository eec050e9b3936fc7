"""Composable validators for untyped values.

A validator checks that a value has an expected shape, optionally converts
it, and raises ``ValidationError`` describing every reason when it does not:

- Validators compose with ``and_`` (or ``&``) into chains
- ``None`` and ``MISSING`` pass through every leaf validator unless
  ``required()`` rejects them
- ``arrays.items`` and ``objects.keys`` validate nested structures and
  collect failures into a reason tree
- ``rendering`` turns reason trees into readable messages

Example:
    ```python
    from valknobs_core import arrays, numbers, objects, required, strings

    user = required().and_(objects.isplain()).and_(objects.keys({
        "name": required().and_(strings.is_()).and_(strings.nonempty()),
        "age": required().and_(numbers.is_()).and_(numbers.min(0)),
        "tags": arrays.is_().and_(arrays.items(required().and_(strings.is_()))),
    }, missing=["tags"]))
    ```
"""

from . import arrays, booleans, dates, functions, numbers, objects, strings, values
from .aggregators import items, keys
from .errors import KeyedReasons, PositionalReasons, Reasons, ValidationError
from .factory import FormatterFactory, formatter_factory
from .rendering import ErrorFormatter, render_error
from .validator import (
    MISSING,
    Validator,
    allow,
    is_absent,
    optional,
    required,
    transform,
    wrap,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "MISSING",
    "Validator",
    "allow",
    "is_absent",
    "optional",
    "required",
    "transform",
    "wrap",
    # Aggregators
    "items",
    "keys",
    # Errors
    "ValidationError",
    "PositionalReasons",
    "KeyedReasons",
    "Reasons",
    # Leaf validators
    "arrays",
    "booleans",
    "dates",
    "functions",
    "numbers",
    "objects",
    "strings",
    "values",
    # Rendering
    "ErrorFormatter",
    "render_error",
    "FormatterFactory",
    "formatter_factory",
]
