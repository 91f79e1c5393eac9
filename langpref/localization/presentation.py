"""
Presentation refresh adapter.

A ready-made refresh callback for LanguagePreference. It flips the
process-wide layout direction and asks the host UI to rebuild its root view
with a transition. Rebuilding itself stays with the host.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Optional

import structlog

from ..errors import ValidationError
from .language import Language, LayoutDirection

logger = structlog.get_logger(__name__)

CROSS_DISSOLVE = "cross_dissolve"
DEFAULT_TRANSITION_DURATION = 0.6

_direction_lock = threading.Lock()
_layout_direction = LayoutDirection.LEFT_TO_RIGHT


def current_layout_direction() -> LayoutDirection:
    """Layout direction most recently applied by a refresher."""
    with _direction_lock:
        return _layout_direction


def set_layout_direction(direction: LayoutDirection) -> None:
    global _layout_direction
    with _direction_lock:
        _layout_direction = LayoutDirection(direction)


@dataclass(frozen=True)
class Transition:
    """Animation used when the root view is replaced."""

    style: str = CROSS_DISSOLVE
    duration: float = DEFAULT_TRANSITION_DURATION


RootRebuilder = Callable[[Language, Transition], None]


class PresentationRefresher:
    """Refresh callback that applies layout direction, then rebuilds the root."""

    def __init__(
        self,
        rebuild_root: Optional[RootRebuilder] = None,
        transition_duration: float = DEFAULT_TRANSITION_DURATION,
        transition: str = CROSS_DISSOLVE,
    ):
        if transition_duration < 0:
            raise ValidationError(
                "Transition duration must not be negative",
                field="transition_duration",
                value=transition_duration,
            )

        self.rebuild_root = rebuild_root
        self.transition = Transition(style=transition, duration=transition_duration)

    def __call__(self, language: Language) -> None:
        set_layout_direction(language.layout_direction)
        logger.info(
            "Layout direction applied",
            language=language.code,
            direction=language.layout_direction.value,
        )

        # No window to restart yet
        if self.rebuild_root is None:
            logger.debug("No root rebuilder registered, skipping rebuild")
            return

        self.rebuild_root(language, self.transition)
