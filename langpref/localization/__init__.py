"""Language preference: supported languages, resolution and persistence."""

from .device import DeviceLocaleProvider, EnvironmentLocaleProvider, StaticLocaleProvider
from .language import Language, LayoutDirection
from .preference import PREFERRED_LANGUAGE_KEY, LanguagePreference
from .presentation import PresentationRefresher, Transition, current_layout_direction
from .storage import InMemorySettingsStore, JsonFileSettingsStore, SettingsStore

__all__ = [
    "DeviceLocaleProvider",
    "EnvironmentLocaleProvider",
    "StaticLocaleProvider",
    "Language",
    "LayoutDirection",
    "PREFERRED_LANGUAGE_KEY",
    "LanguagePreference",
    "PresentationRefresher",
    "Transition",
    "current_layout_direction",
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
    "SettingsStore",
]
