from pathlib import Path
from typing import Callable, Dict, List, Sequence

from core import Todo, TodoStorageError


def render_todotxt(todos: Sequence[Todo]) -> str:
    lines: List[str] = []
    for todo in todos:
        prefix = "x " if todo.completed else ""
        if todo.priority:
            prefix += f"({todo.priority.letter}) "
        lines.append(prefix + todo.text)
    return "".join(line + "\n" for line in lines)


def render_markdown(todos: Sequence[Todo]) -> str:
    lines = ["# TODOs", ""]
    for todo in todos:
        checkbox = "[x]" if todo.completed else "[ ]"
        lines.append(f"- {checkbox} {todo.text}")
    return "\n".join(lines) + "\n"


RENDERERS: Dict[str, Callable[[Sequence[Todo]], str]] = {
    ".txt": render_todotxt,
    ".md": render_markdown,
}


class FileExporter:
    """Plain-text exports picked by file extension."""

    def supports(self, path: Path) -> bool:
        return Path(path).suffix.lower() in RENDERERS

    def export(self, path: Path, todos: Sequence[Todo]) -> None:
        path = Path(path).expanduser()
        renderer = RENDERERS.get(path.suffix.lower())
        if renderer is None:
            raise ValueError(f"unsupported export format: {path.suffix or path.name}")
        try:
            path.write_text(renderer(todos), encoding="utf-8")
        except OSError as exc:
            raise TodoStorageError(path, exc.strerror or str(exc)) from exc


__all__ = ["FileExporter", "RENDERERS", "render_markdown", "render_todotxt"]
