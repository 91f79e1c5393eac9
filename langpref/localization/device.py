"""Device locale providers.

A provider answers one question: which locale identifiers does the host
prefer, most preferred first.
"""

import os
from abc import ABC, abstractmethod
from typing import Iterable, List, Mapping, Optional

import structlog

logger = structlog.get_logger(__name__)

# Variables checked after LANGUAGE, in the order gettext consults them
LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

_IGNORED_LOCALES = frozenset({"C", "POSIX"})


class DeviceLocaleProvider(ABC):
    """Source of the device's ordered locale list."""

    @abstractmethod
    def locales(self) -> List[str]:
        """Return locale identifiers, most preferred first. May be empty."""
        pass


class StaticLocaleProvider(DeviceLocaleProvider):
    """Fixed locale list, for embedding hosts that already know it."""

    def __init__(self, locales: Optional[Iterable[str]] = None):
        self._locales = list(locales or [])

    def locales(self) -> List[str]:
        return list(self._locales)


class EnvironmentLocaleProvider(DeviceLocaleProvider):
    """Reads the POSIX locale environment.

    ``LANGUAGE`` is a colon-separated priority list and wins over the
    single-valued ``LC_ALL``, ``LC_MESSAGES`` and ``LANG``.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def locales(self) -> List[str]:
        found: List[str] = []

        language = self._environ.get("LANGUAGE", "")
        candidates = language.split(":") + [self._environ.get(name, "") for name in LOCALE_ENV_VARS]

        for candidate in candidates:
            candidate = candidate.strip()
            if not candidate or candidate in _IGNORED_LOCALES or candidate in found:
                continue
            found.append(candidate)

        logger.debug("Device locales read from environment", locales=found)
        return found
