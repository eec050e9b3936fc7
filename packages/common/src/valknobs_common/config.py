"""Configuration helpers shared by valknobs packages.

Configuration is plain data: a dictionary loaded from a YAML or JSON file,
with ``${VAR}`` / ``${VAR:default}`` environment references substituted, and
handed to a ``FactoryBase`` subclass as keyword arguments.

Example:
    ```yaml
    # formatter.yaml
    prefix: "${VALKNOBS_PREFIX:ValidationError:}"
    indent: 4
    ```

    ```python
    config = load_config("formatter.yaml")
    formatter = formatter_factory.create(**config)
    ```
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class FactoryBase:
    """Base class for factory objects.

    Factories that inherit from this should implement
    the create method.
    """

    def create(self, **config: Any) -> Any:
        """Create an object from configuration.

        Args:
            **config: Configuration parameters

        Returns:
            Created object
        """
        raise NotImplementedError("Subclasses must implement create method")


def substitute_env_vars(data: Any) -> Any:
    """Recursively substitute environment variables in configuration.

    Supports formats:
    - ${VAR_NAME}: Required variable, raises error if not set
    - ${VAR_NAME:default_value}: Optional with default

    Args:
        data: Configuration data (dict, list, string, or primitive)

    Returns:
        Data with environment variables substituted

    Raises:
        ConfigurationError: If a required environment variable is not set

    Example:
        >>> os.environ["MY_VAR"] = "hello"
        >>> substitute_env_vars({"key": "${MY_VAR}", "default": "${MISSING:world}"})
        {'key': 'hello', 'default': 'world'}
    """
    if isinstance(data, dict):
        return {k: substitute_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [substitute_env_vars(item) for item in data]
    elif isinstance(data, str):
        return _substitute_string(data)
    else:
        return data


def _substitute_string(value: str) -> str:
    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default_value = match.group(2)

        env_value = os.environ.get(var_name)

        if env_value is not None:
            return env_value
        elif default_value is not None:
            return default_value
        else:
            raise ConfigurationError(
                f"Required environment variable not set: {var_name}",
                context={"variable": var_name},
            )

    return _ENV_PATTERN.sub(replacer, value)


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a configuration dictionary from a YAML or JSON file.

    Args:
        path: Path to a .yaml, .yml or .json file

    Returns:
        Configuration dictionary with environment variables substituted.
        An empty file yields an empty dictionary.

    Raises:
        ConfigurationError: If the file is missing, has an unsupported
            suffix, does not contain a mapping, or references an unset
            environment variable
    """
    path = Path(path).resolve()

    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    logger.debug(f"Loading configuration from {path}")

    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f) or {}
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported file format: {suffix}", context={"path": str(path)}
            )

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )

    result: dict[str, Any] = substitute_env_vars(data)
    return result


__all__ = [
    "FactoryBase",
    "load_config",
    "substitute_env_vars",
]
