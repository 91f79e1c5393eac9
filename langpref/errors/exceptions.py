"""
Error hierarchy for langpref.

Every error carries a machine-readable code and a context dictionary so it can
be logged with structlog as key/value pairs.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone


class LangPrefError(Exception):
    """
    Base exception for all langpref errors.

    Carries error context for structured logging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class ConfigurationError(LangPrefError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"config_key": config_key}, **kwargs)


class ValidationError(LangPrefError):
    """Invalid argument passed by a caller."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs):
        super().__init__(
            message,
            context={"field": field, "value": repr(value) if value is not None else None},
            **kwargs
        )


class StorageError(LangPrefError):
    """Settings store read/write errors."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        key: Optional[str] = None,
        path: Optional[str] = None,
        **kwargs
    ):
        super().__init__(
            message,
            context={"operation": operation, "key": key, "path": path},
            **kwargs
        )


class LocalizationError(LangPrefError):
    """An explicitly requested language code is not supported."""

    def __init__(self, message: str, language_code: Optional[str] = None, **kwargs):
        super().__init__(message, context={"language_code": language_code}, **kwargs)
