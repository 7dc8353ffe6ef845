"""Editor-level key events, independent of the terminal library."""

from dataclasses import dataclass
from typing import Optional

ENTER = "enter"
ESCAPE = "escape"
BACKSPACE = "backspace"
UP = "up"
DOWN = "down"


@dataclass(frozen=True)
class KeyInput:
    """A single key press: one printable character or a named special key."""

    key: str
    ctrl: bool = False

    @property
    def char(self) -> Optional[str]:
        if self.ctrl or len(self.key) != 1:
            return None
        return self.key if self.key.isprintable() else None

    @classmethod
    def control(cls, letter: str) -> "KeyInput":
        return cls(letter.lower(), ctrl=True)


def keys_for(text: str):
    """KeyInput for every character of text (tests and scripted input)."""
    return [KeyInput(ch) for ch in text]


__all__ = ["KeyInput", "keys_for", "ENTER", "ESCAPE", "BACKSPACE", "UP", "DOWN"]
