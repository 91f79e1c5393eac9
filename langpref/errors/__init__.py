"""
Error handling for langpref.

- Structured error hierarchy
- Logging decorators for best-effort operations
"""

from .exceptions import (
    LangPrefError,
    ConfigurationError,
    ValidationError,
    StorageError,
    LocalizationError,
)

from .decorators import (
    log_errors,
    with_fallback,
)

__all__ = [
    # Exceptions
    "LangPrefError",
    "ConfigurationError",
    "ValidationError",
    "StorageError",
    "LocalizationError",

    # Decorators
    "log_errors",
    "with_fallback",
]
