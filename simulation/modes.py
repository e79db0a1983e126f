import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    VULNERABLE = "vulnerable"
    PROTECTED = "protected"


class ModeSelector:
    """
    Holds the active protection mode.

    Every hook registered with on_switch runs before the new mode becomes
    visible, so a token issued under the old mode is already gone by the time
    anything can read the new one.
    """

    def __init__(self, initial=Mode.VULNERABLE):
        self._mode = Mode(initial)
        self._switch_hooks = []

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def is_protected(self) -> bool:
        return self._mode is Mode.PROTECTED

    def on_switch(self, hook):
        self._switch_hooks.append(hook)

    def select(self, mode) -> bool:
        """Switch to `mode`. Returns False when it is already active."""
        mode = Mode(mode)
        if mode is self._mode:
            return False

        for hook in self._switch_hooks:
            hook()
        logger.info("Mode switched: %s -> %s", self._mode.value, mode.value)
        self._mode = mode
        return True
