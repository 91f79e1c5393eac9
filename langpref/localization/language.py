"""Supported UI languages."""

import re
from enum import Enum
from typing import Any, List


class LayoutDirection(str, Enum):
    """Horizontal layout direction of the presentation layer."""

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"


_DISPLAY_NAMES = {
    "en": "English",
    "ar": "Arabic",
    "fr": "French",
}

_RIGHT_TO_LEFT = frozenset({"ar"})

# Primary subtag of identifiers like "ar-SA", "fr_FR.UTF-8", "en@euro"
_SUBTAG_SEPARATORS = re.compile(r"[-_.@]")


class Language(Enum):
    """Closed set of languages the UI can be shown in.

    The first member is the default used whenever a code cannot be matched.
    """

    ENGLISH = "en"
    ARABIC = "ar"
    FRENCH = "fr"

    @property
    def code(self) -> str:
        """Canonical locale identifier, also the persisted value."""
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    @property
    def is_right_to_left(self) -> bool:
        return self.value in _RIGHT_TO_LEFT

    @property
    def layout_direction(self) -> LayoutDirection:
        if self.is_right_to_left:
            return LayoutDirection.RIGHT_TO_LEFT
        return LayoutDirection.LEFT_TO_RIGHT

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def all(cls) -> List["Language"]:
        """Return every language in display order."""
        return [cls.ENGLISH, cls.ARABIC, cls.FRENCH]

    @classmethod
    def from_code(cls, code: Any) -> "Language":
        """Exact reverse lookup; anything unknown maps to the default language."""
        if isinstance(code, str):
            for language in cls:
                if language.value == code:
                    return language
        return cls.default()

    @classmethod
    def from_locale(cls, identifier: Any) -> "Language":
        """Map a device locale identifier to a language.

        Tries an exact code match first, then the lower-cased primary
        language subtag, so ``"ar-SA"`` and ``"fr_FR.UTF-8"`` resolve to
        Arabic and French.
        """
        if not isinstance(identifier, str) or not identifier.strip():
            return cls.default()

        identifier = identifier.strip()
        for language in cls:
            if language.value == identifier:
                return language

        primary = _SUBTAG_SEPARATORS.split(identifier, maxsplit=1)[0].lower()
        return cls.from_code(primary)
