"""Configuration using Pydantic Settings.

Values come from keyword arguments, then ``LANGPREF_*`` environment
variables, then the defaults below.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..localization.preference import PREFERRED_LANGUAGE_KEY
from ..localization.presentation import DEFAULT_TRANSITION_DURATION

DEFAULT_SETTINGS_FILE = Path("~/.langpref/settings.json")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="LANGPREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    settings_file: Path = Field(
        default=DEFAULT_SETTINGS_FILE,
        validate_default=True,
        description="JSON file holding the persisted language preference",
    )
    preference_key: str = Field(
        default=PREFERRED_LANGUAGE_KEY,
        min_length=1,
        description="Key of the preferred language inside the settings file",
    )
    transition_duration: float = Field(
        default=DEFAULT_TRANSITION_DURATION,
        ge=0,
        description="Seconds of the cross-dissolve used when the UI reloads",
    )
    debug: bool = Field(default=False, description="Enable debug logging")

    @field_validator("settings_file")
    @classmethod
    def expand_settings_file(cls, v: Path) -> Path:
        return v.expanduser()
