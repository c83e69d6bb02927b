"""Key vocabulary understood by the wizard."""

from __future__ import annotations

from enum import Enum

__all__ = ["KEY_BINDINGS", "WizardKey", "key_for"]


class WizardKey(Enum):
    """Abstract key classes; screens react to these, not to raw key names."""

    QUIT = "quit"
    CONFIRM = "confirm"
    DOWN = "down"
    UP = "up"
    TOGGLE = "toggle"
    BACK = "back"
    CANCEL = "cancel"


# Textual key names -> abstract keys.
KEY_BINDINGS: dict[str, WizardKey] = {
    "q": WizardKey.QUIT,
    "enter": WizardKey.CONFIRM,
    "j": WizardKey.DOWN,
    "down": WizardKey.DOWN,
    "k": WizardKey.UP,
    "up": WizardKey.UP,
    "space": WizardKey.TOGGLE,
    "backspace": WizardKey.BACK,
    "escape": WizardKey.CANCEL,
}


def key_for(name: str) -> WizardKey | None:
    """Return the abstract key bound to *name*, or ``None`` if unbound."""
    return KEY_BINDINGS.get(name)
