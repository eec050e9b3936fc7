"""Common exception hierarchy for all valknobs packages.

Every exception raised on purpose by a valknobs package derives from
``ValknobsError``. Exceptions carry an optional context dictionary so that
callers can report structured information without parsing messages.

Example:
    ```python
    from valknobs_common.exceptions import ConfigurationError, ValknobsError

    try:
        formatter_factory.create(indent=-1)
    except ValknobsError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```

Package-Specific Extensions:
    ```python
    from valknobs_common.exceptions import ValknobsError

    class MyPackageError(ValknobsError):
        '''Base exception for mypackage.'''
        pass
    ```

Note that only data-rejection failures are modelled as exceptions of this
hierarchy. Defects inside caller-supplied predicates surface as whatever
exception the predicate raised.
"""

from typing import Any, Dict


class ValknobsError(Exception):
    """Base exception for all valknobs packages.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (both are supported)

    Example:
        ```python
        error = ValknobsError(
            "Operation failed",
            context={"operation": "render", "depth": 3}
        )
        str(error)
        # 'Operation failed'
        error.context
        # {'operation': 'render', 'depth': 3}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(ValknobsError):
    """Raised when configuration is invalid or missing.

    Use this exception for configuration-related errors including:
    - Missing configuration files
    - Unsupported configuration file formats
    - Unset environment variables referenced by a configuration
    - Invalid factory options

    Example:
        ```python
        raise ConfigurationError(
            "indent must be a non-negative integer",
            context={"option": "indent", "value": -1}
        )
        ```
    """

    pass


__all__ = [
    "ValknobsError",
    "ConfigurationError",
]
