"""Active UI language resolution and persistence."""

import threading
from typing import Callable, List, Optional

import structlog

from ..errors import ValidationError, log_errors, with_fallback
from .device import DeviceLocaleProvider, StaticLocaleProvider
from .language import Language
from .storage import SettingsStore

logger = structlog.get_logger(__name__)

PREFERRED_LANGUAGE_KEY = "UserPreferedAppLanguage"

RefreshCallback = Callable[[Language], None]

# Returned by _read_stored when the store raised, as opposed to None for "absent"
_READ_FAILED = object()


class LanguagePreference:
    """Resolves which language the UI is shown in.

    Resolution order: the persisted explicit choice, then the first device
    locale, then the default language. The first resolution without a
    persisted choice stores its result, so later reads never consult the
    device again. A store that cannot be read is not treated as empty: the
    device language is returned for that call only, without being stored.
    Nothing here raises because of missing or broken data.

    One instance is meant to live for the whole process and be handed to
    whatever needs to read or change the language.
    """

    def __init__(
        self,
        store: SettingsStore,
        device_locales: Optional[DeviceLocaleProvider] = None,
        preference_key: str = PREFERRED_LANGUAGE_KEY,
        refresh_callback: Optional[RefreshCallback] = None,
    ):
        self.store = store
        self.device_locales = device_locales or StaticLocaleProvider()
        self.preference_key = preference_key
        self._refresh_callback = refresh_callback
        self._current: Optional[Language] = None
        self._lock = threading.RLock()

    def current(self) -> Language:
        """Return the active language, adopting the device one if none is stored."""
        with self._lock:
            if self._current is not None:
                return self._current

            stored = self._read_stored()
            if stored is _READ_FAILED:
                language = self.device_language()
                logger.warning("Store unreadable, using device language unsaved", language=language.code, source="device")
                return language

            if stored is not None:
                self._current = Language.from_code(stored)
                logger.debug("Language from storage", language=self._current.code, source="storage")
                return self._current

            language = self.device_language()
            logger.info("Adopting device language", language=language.code, source="device")
            self._persist(language)
            self._current = language
            return language

    def set_current(self, language: Language) -> None:
        """Persist ``language`` and notify the refresh callback."""
        if not isinstance(language, Language):
            raise ValidationError(
                "Expected a Language member", field="language", value=language
            )

        with self._lock:
            self._persist(language)
            self._current = language
            logger.info("Language changed", language=language.code)

            callback = self._refresh_callback
            if callback is not None:
                self._notify(callback, language)

    def register_refresh_callback(self, callback: Optional[RefreshCallback]) -> None:
        """Install the single refresh callback, replacing the previous one."""
        with self._lock:
            self._refresh_callback = callback

    def device_language(self) -> Language:
        """Language derived from the device locale list, ignoring storage."""
        locales = self._device_locale_list()
        if not locales:
            return Language.default()
        return Language.from_locale(locales[0])

    def has_explicit_choice(self) -> bool:
        """Whether the store currently holds a choice. False if it cannot be read."""
        with self._lock:
            stored = self._read_stored()
            return stored is not None and stored is not _READ_FAILED

    def reload(self) -> None:
        """Forget the cached language; the next read goes back to the store."""
        with self._lock:
            self._current = None

    @log_errors(level="warning", reraise=False, default=_READ_FAILED, operation_name="read_preferred_language")
    def _read_stored(self) -> object:
        return self.store.get(self.preference_key)

    @log_errors(reraise=False, operation_name="persist_preferred_language")
    def _persist(self, language: Language) -> None:
        self.store.set(self.preference_key, language.code)

    @with_fallback(lambda self: [])
    def _device_locale_list(self) -> List[str]:
        return list(self.device_locales.locales())

    @log_errors(include_traceback=True, reraise=False, operation_name="refresh_callback")
    def _notify(self, callback: RefreshCallback, language: Language) -> None:
        callback(language)
