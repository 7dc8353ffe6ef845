from enum import Enum
from typing import Final, Optional


class Priority(Enum):
    A = ("A", 3, "red")
    B = ("B", 2, "yellow")
    C = ("C", 1, "blue")

    @property
    def letter(self) -> str:
        return self.value[0]

    @property
    def rank(self) -> int:
        return self.value[1]

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["Priority"]:
        """Return the priority for a letter token, or None for anything else."""
        token = normalize_priority(value)
        for priority in cls:
            if priority.letter == token:
                return priority
        return None


_CANONICAL_CODES: Final[frozenset[str]] = frozenset({"A", "B", "C"})


def normalize_priority(value: Optional[str]) -> str:
    """Normalize a priority token to its upper-case letter.

    Unknown tokens normalize to an empty string.
    """
    if not isinstance(value, str):
        return ""
    token = value.strip().upper()
    return token if token in _CANONICAL_CODES else ""


def priority_sort_key(priority: Optional[Priority]) -> int:
    """Sort key placing A before B before C before no priority."""
    if priority is None:
        return len(Priority)
    return len(Priority) - priority.rank
