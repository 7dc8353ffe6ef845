import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .priority import Priority

PRIORITY_PREFIX_RE = re.compile(r"^\(([abcABC])\)")


@dataclass(frozen=True)
class Todo:
    """A single list item. Identity is its position in the store."""

    text: str
    completed: bool = False
    priority: Optional[Priority] = None
    note: Optional[str] = None

    def toggled(self) -> "Todo":
        return replace(self, completed=not self.completed)

    def with_text(self, raw: str) -> "Todo":
        priority, text = parse_priority(raw)
        return replace(self, text=text, priority=priority)

    def with_note(self, note: Optional[str]) -> "Todo":
        return replace(self, note=note)

    def editable_text(self) -> str:
        """Text as typed by the user, including the priority prefix."""
        if self.priority is None:
            return self.text
        return f"({self.priority.letter}) {self.text}"


def parse_priority(raw: str) -> Tuple[Optional[Priority], str]:
    """Split a leading ``(A)``/``(B)``/``(C)`` prefix off user text."""
    text = raw.strip()
    m = PRIORITY_PREFIX_RE.match(text)
    if not m:
        return None, text
    return Priority.from_string(m.group(1)), text[m.end():].strip()


def todo_from_input(raw: str) -> Todo:
    priority, text = parse_priority(raw)
    return Todo(text=text, completed=False, priority=priority)
