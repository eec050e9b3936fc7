"""Human-readable rendering of ``ValidationError`` reason trees.

Rendering only reads errors. It branches on ``error.kind`` to tell
positional reasons (sequence elements) from keyed reasons (mapping keys).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .errors import ValidationError

DEFAULT_PREFIX = "ValidationError:"


def _label(kind: str | None, key: Any) -> str:
    if kind == "keyed":
        return f'"{key}"'
    return str(key)


def _render(error: ValidationError) -> str:
    if error.reasons is None:
        return error.message

    parts = [
        f"-> {_label(error.kind, key)}: {_render(reason)}"
        for key, reason in error.reasons.failures()
    ]
    return f"{error.message} [{'; '.join(parts)}]"


def render_error(error: ValidationError, prefix: str = DEFAULT_PREFIX) -> str:
    """Render an error and all of its reasons on a single line.

    Args:
        error: The error to render
        prefix: Text put before the rendered message

    Returns:
        Rendered message, e.g.
        ``ValidationError: value does not match structure [-> "b": value is null or undefined]``
    """
    rendered = _render(error)
    return f"{prefix} {rendered}" if prefix else rendered


@dataclass(frozen=True)
class ErrorFormatter:
    """Multi-line renderer for reason trees.

    Attributes:
        prefix: Text put before the root message
        separator: Text between a key or index and its message
        indent: Spaces added per nesting level
        max_depth: Deepest nesting level rendered, None for no limit
    """

    prefix: str = DEFAULT_PREFIX
    separator: str = ": "
    indent: int = 2
    max_depth: int | None = None

    def format(self, error: ValidationError) -> str:
        """Render the error as an indented tree, one failure per line."""
        root = f"{self.prefix} {error.message}" if self.prefix else error.message
        return "\n".join([root, *self._lines(error, 1)])

    def _lines(self, error: ValidationError, depth: int) -> Iterator[str]:
        if error.reasons is None:
            return

        pad = " " * (self.indent * depth)

        if self.max_depth is not None and depth > self.max_depth:
            yield f"{pad}..."
            return

        for key, reason in error.reasons.failures():
            yield f"{pad}{_label(error.kind, key)}{self.separator}{reason.message}"
            yield from self._lines(reason, depth + 1)

    def flatten(self, error: ValidationError) -> list[tuple[tuple[Any, ...], str]]:
        """List every leaf failure with the path of keys and indices leading to it.

        Example:
            ```python
            formatter.flatten(error)
            # [(('tags', 1), 'value is not string'), (('name',), 'key name in value is missing')]
            ```
        """
        return list(self._leaves(error, ()))

    def _leaves(
        self, error: ValidationError, path: tuple[Any, ...]
    ) -> Iterator[tuple[tuple[Any, ...], str]]:
        if error.reasons is None:
            yield path, error.message
            return

        for key, reason in error.reasons.failures():
            yield from self._leaves(reason, (*path, key))


__all__ = [
    "DEFAULT_PREFIX",
    "ErrorFormatter",
    "render_error",
]
