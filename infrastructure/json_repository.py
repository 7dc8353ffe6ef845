import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from core import Priority, Todo, TodoFormatError, TodoStorageError

logger = logging.getLogger("tuido.storage")


def todo_to_dict(todo: Todo) -> Dict[str, Any]:
    return {
        "text": todo.text,
        "completed": todo.completed,
        "priority": todo.priority.letter if todo.priority else None,
        "note": todo.note,
    }


def todo_from_dict(data: Any) -> Todo:
    if not isinstance(data, dict):
        raise ValueError("todo entry must be an object")
    text = data.get("text")
    completed = data.get("completed")
    if not isinstance(text, str):
        raise ValueError("todo entry needs a string 'text'")
    if not isinstance(completed, bool):
        raise ValueError("todo entry needs a boolean 'completed'")
    note = data.get("note")
    return Todo(
        text=text,
        completed=completed,
        priority=Priority.from_string(data.get("priority")),
        note=note if isinstance(note, str) else None,
    )


def parse_todos(content: str) -> List[Todo]:
    payload = json.loads(content)
    if not isinstance(payload, list):
        raise ValueError("todo file must contain a JSON array")
    return [todo_from_dict(item) for item in payload]


def dump_todos(todos: Sequence[Todo]) -> str:
    return json.dumps([todo_to_dict(t) for t in todos], ensure_ascii=False, indent=2)


class JsonTodoRepository:
    """Whole-file JSON storage: every save overwrites the file."""

    def load(self, path: Path) -> List[Todo]:
        path = Path(path).expanduser()
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise TodoStorageError(path, exc.strerror or str(exc)) from exc
        try:
            todos = parse_todos(raw.decode("utf-8"))
        except ValueError as exc:
            # UnicodeDecodeError and json.JSONDecodeError are ValueErrors too
            raise TodoFormatError(path, str(exc)) from exc
        logger.debug("Loaded %d todos from %s", len(todos), path)
        return todos

    def save(self, path: Path, todos: Sequence[Todo]) -> None:
        path = Path(path).expanduser()
        try:
            path.write_text(dump_todos(todos), encoding="utf-8")
        except OSError as exc:
            raise TodoStorageError(path, exc.strerror or str(exc)) from exc
        logger.debug("Saved %d todos to %s", len(todos), path)


__all__ = ["JsonTodoRepository", "todo_to_dict", "todo_from_dict", "parse_todos", "dump_todos"]
