"""Common utilities and base classes for valknobs packages.

This package provides shared functionality used across all valknobs packages:

- **Exceptions**: Unified exception hierarchy with context support
- **Config**: Factory base class and YAML/JSON configuration loading

Example:
    ```python
    from valknobs_common import ValknobsError, load_config

    config = load_config("formatter.yaml")
    ```
"""

from valknobs_common.config import FactoryBase, load_config, substitute_env_vars
from valknobs_common.exceptions import ConfigurationError, ValknobsError

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ValknobsError",
    "ConfigurationError",
    # Config
    "FactoryBase",
    "load_config",
    "substitute_env_vars",
]
