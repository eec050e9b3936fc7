"""Extra validators for valknobs_core.

Example:
    ```python
    from valknobs_core import required, strings as core_strings
    from valknobs_extras import strings

    contact = required().and_(core_strings.is_()).and_(strings.trim()).and_(strings.email())
    ```
"""

from . import strings

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "strings",
]
