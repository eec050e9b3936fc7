"""Factory classes for configurable valknobs_core components."""

import logging
from pathlib import Path
from typing import Any

from valknobs_common import ConfigurationError, FactoryBase, load_config

from .rendering import DEFAULT_PREFIX, ErrorFormatter

logger = logging.getLogger(__name__)


class FormatterFactory(FactoryBase):
    """Factory for creating error formatters from configuration.

    Configuration Options:
        prefix (str): Text put before the root message (default: "ValidationError:")
        separator (str): Text between a key or index and its message (default: ": ")
        indent (int): Spaces per nesting level (default: 2)
        max_depth (int): Deepest nesting level rendered (default: unlimited)

    Example Configuration:
        formatter:
          prefix: "Invalid payload:"
          indent: 4
          max_depth: 3
    """

    OPTIONS = ("prefix", "separator", "indent", "max_depth")

    def create(self, **config: Any) -> ErrorFormatter:
        """Create an ErrorFormatter instance from configuration.

        Args:
            **config: Formatter configuration

        Returns:
            ErrorFormatter instance

        Raises:
            ConfigurationError: If an option has an invalid value
        """
        for option in config:
            if option not in self.OPTIONS:
                logger.warning(f"Unknown formatter option: {option}")

        prefix = config.get("prefix", DEFAULT_PREFIX)
        separator = config.get("separator", ": ")
        indent = config.get("indent", 2)
        max_depth = config.get("max_depth")

        for option, value in (("prefix", prefix), ("separator", separator)):
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{option} must be a string", context={"option": option, "value": value}
                )

        if not _is_count(indent):
            raise ConfigurationError(
                "indent must be a non-negative integer",
                context={"option": "indent", "value": indent},
            )

        if max_depth is not None and not _is_count(max_depth):
            raise ConfigurationError(
                "max_depth must be a non-negative integer",
                context={"option": "max_depth", "value": max_depth},
            )

        logger.info(f"Creating error formatter: indent={indent}, max_depth={max_depth}")
        return ErrorFormatter(prefix=prefix, separator=separator, indent=indent, max_depth=max_depth)

    def create_from_file(self, path: str | Path) -> ErrorFormatter:
        """Create an ErrorFormatter from a YAML or JSON configuration file."""
        return self.create(**load_config(path))


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


# Create singleton instance for registration
formatter_factory = FormatterFactory()
