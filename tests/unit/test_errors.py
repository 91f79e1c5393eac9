"""
Unit tests for the error handling system.

Tests error hierarchy and decorators.
"""

import pytest
from unittest.mock import Mock

from langpref.errors import (
    LangPrefError,
    ConfigurationError,
    ValidationError,
    StorageError,
    LocalizationError,
    log_errors,
    with_fallback,
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    def test_base_error_creation(self):
        """Test basic LangPrefError creation."""
        error = LangPrefError(message="Test error", error_code="TEST_ERROR")

        assert error.message == "Test error"
        assert error.error_code == "TEST_ERROR"
        assert error.timestamp is not None
        assert isinstance(error.context, dict)
        assert str(error) == "Test error"

    def test_default_error_code(self):
        """Error code defaults to the class name."""
        assert StorageError("boom").error_code == "StorageError"

    def test_error_to_dict(self):
        """Test error serialization."""
        cause = OSError("disk full")
        error = LangPrefError(
            message="Test error",
            error_code="TEST_ERROR",
            context={"key": "value"},
            previous_error=cause,
        )

        error_dict = error.to_dict()

        assert error_dict["error_type"] == "LangPrefError"
        assert error_dict["message"] == "Test error"
        assert error_dict["error_code"] == "TEST_ERROR"
        assert error_dict["context"]["key"] == "value"
        assert error_dict["previous_error"] == "disk full"
        assert "timestamp" in error_dict

    def test_configuration_error(self):
        """Test ConfigurationError specifics."""
        error = ConfigurationError("Invalid config", config_key="transition_duration")

        assert isinstance(error, LangPrefError)
        assert error.context["config_key"] == "transition_duration"

    def test_validation_error(self):
        """Test ValidationError specifics."""
        error = ValidationError("Invalid input", field="language", value="fr")

        assert error.context["field"] == "language"
        assert error.context["value"] == "'fr'"

    def test_storage_error(self):
        """Test StorageError specifics."""
        error = StorageError(
            "Write failed",
            operation="set",
            key="UserPreferedAppLanguage",
            path="/tmp/settings.json",
        )

        assert error.context == {
            "operation": "set",
            "key": "UserPreferedAppLanguage",
            "path": "/tmp/settings.json",
        }

    def test_localization_error(self):
        """Test LocalizationError specifics."""
        error = LocalizationError("Unsupported language", language_code="de")

        assert error.context["language_code"] == "de"


class TestLogErrors:
    """Test log_errors decorator."""

    def test_passes_through_result(self):
        """Successful calls are untouched."""
        @log_errors()
        def ok(x):
            return x * 2

        assert ok(21) == 42

    def test_reraises_by_default(self):
        """Errors are logged and re-raised."""
        @log_errors()
        def failing():
            raise StorageError("boom")

        with pytest.raises(StorageError):
            failing()

    def test_swallows_with_default(self):
        """With reraise=False the default value is returned."""
        @log_errors(level="warning", reraise=False, default="fallback", include_traceback=True)
        def failing():
            raise OSError("boom")

        assert failing() == "fallback"

    def test_only_catches_configured_types(self):
        """Exceptions outside ``catch`` propagate untouched."""
        @log_errors(reraise=False, catch=(StorageError,))
        def failing():
            raise KeyError("other")

        with pytest.raises(KeyError):
            failing()

    def test_wraps_methods(self):
        """The decorator works on methods."""
        class Service:
            @log_errors(reraise=False)
            def run(self):
                raise RuntimeError("boom")

        assert Service().run() is None


class TestWithFallback:
    """Test with_fallback decorator."""

    def test_primary_result_used(self):
        """The fallback is not called when the primary succeeds."""
        fallback = Mock(return_value="fallback")

        @with_fallback(fallback)
        def primary(x):
            return x

        assert primary("primary") == "primary"
        fallback.assert_not_called()

    def test_fallback_gets_same_arguments(self):
        """The fallback runs with the primary's arguments."""
        fallback = Mock(return_value=[])

        @with_fallback(fallback, log_errors=False)
        def primary(x, y=None):
            raise OSError("boom")

        assert primary(1, y=2) == []
        fallback.assert_called_once_with(1, y=2)
