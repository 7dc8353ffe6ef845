from .priority import Priority, normalize_priority, priority_sort_key
from .todo import Todo, parse_priority, todo_from_input
from .errors import ShellCommandError, TodoFormatError, TodoStorageError

__all__ = [
    "Priority",
    "normalize_priority",
    "priority_sort_key",
    "Todo",
    "parse_priority",
    "todo_from_input",
    # Errors
    "ShellCommandError",
    "TodoFormatError",
    "TodoStorageError",
]
