"""
Pytest configuration and fixtures for langpref tests.
"""

import pytest
from pathlib import Path
from unittest.mock import Mock

from langpref.config.settings import Settings
from langpref.di import shutdown_di
from langpref.localization import (
    InMemorySettingsStore,
    JsonFileSettingsStore,
    LanguagePreference,
    StaticLocaleProvider,
)
from langpref.localization.presentation import set_layout_direction
from langpref.localization.language import LayoutDirection


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset process-wide state between tests."""
    set_layout_direction(LayoutDirection.LEFT_TO_RIGHT)
    yield
    shutdown_di()
    set_layout_direction(LayoutDirection.LEFT_TO_RIGHT)


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Settings file inside a temporary directory."""
    return tmp_path / "prefs" / "settings.json"


@pytest.fixture
def test_config(settings_path: Path) -> Settings:
    """Create test configuration."""
    return Settings(
        settings_file=settings_path,
        transition_duration=0.25,
        debug=True,
    )


@pytest.fixture
def memory_store() -> InMemorySettingsStore:
    """Empty in-memory settings store."""
    return InMemorySettingsStore()


@pytest.fixture
def spy_store(memory_store: InMemorySettingsStore) -> Mock:
    """In-memory store wrapped so reads and writes can be counted."""
    return Mock(wraps=memory_store)


@pytest.fixture
def file_store(settings_path: Path) -> JsonFileSettingsStore:
    """JSON file store in a temporary directory."""
    return JsonFileSettingsStore(settings_path)


@pytest.fixture
def make_preference():
    """Build a LanguagePreference over a store and a fixed device locale list."""
    def _make(store, device_locales=None, **kwargs) -> LanguagePreference:
        return LanguagePreference(
            store=store,
            device_locales=StaticLocaleProvider(device_locales or []),
            **kwargs
        )
    return _make
