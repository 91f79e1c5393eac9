"""Configuration loading."""

from pathlib import Path
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigurationError
from .settings import Settings

logger = structlog.get_logger(__name__)


def load_config(settings_file: Optional[Union[str, Path]] = None, **overrides: Any) -> Settings:
    """Build Settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: if a value fails validation.
    """
    if settings_file is not None:
        overrides["settings_file"] = Path(settings_file)

    try:
        config = Settings(**overrides)
    except PydanticValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        config_key = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid configuration: {e}", config_key=config_key, previous_error=e
        ) from e

    logger.debug(
        "Configuration loaded",
        settings_file=str(config.settings_file),
        preference_key=config.preference_key,
        debug=config.debug,
    )
    return config
