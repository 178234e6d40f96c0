"""Which pointer buttons are currently held down."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PointerButton(Enum):
    """The buttons a pointing device may have."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    MIDDLE = "middle"
    EXTRA1 = "extra1"
    EXTRA2 = "extra2"


@dataclass
class ButtonState:
    """The held state of each pointer button; all start released."""

    _down: set[PointerButton] = field(default_factory=set, repr=False)

    def get(self, button: PointerButton) -> bool:
        """Whether the button is held down."""
        return button in self._down

    def set(self, button: PointerButton, value: bool) -> None:
        """Mark the button as held down or released."""
        if value:
            self._down.add(button)
        else:
            self._down.discard(button)

    def __repr__(self) -> str:
        held = ", ".join(sorted(button.value for button in self._down))
        return f"ButtonState({held})"