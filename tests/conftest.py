from pathlib import Path
from typing import Dict, List, Sequence

import pytest

from core import Todo, TodoFormatError, TodoStorageError
from core.editor.application.editor_state import EditorContext, EditorDeps
from core.editor.interface.i18n import translate
from core.editor.interface.keys import KeyInput
from core.editor.interface.mode_controller import handle_key


class MemoryRepository:
    """Repository keeping files in a dict; paths listed in broken are malformed."""

    def __init__(self):
        self.files: Dict[Path, List[Todo]] = {}
        self.broken = set()
        self.fail_save = False
        self.saves = []

    def load(self, path: Path) -> List[Todo]:
        path = Path(path)
        if path in self.broken:
            raise TodoFormatError(path, "expected a JSON array")
        if path not in self.files:
            raise TodoStorageError(path, "No such file or directory")
        return list(self.files[path])

    def save(self, path: Path, todos: Sequence[Todo]) -> None:
        if self.fail_save:
            raise TodoStorageError(path, "Permission denied")
        self.files[Path(path)] = list(todos)
        self.saves.append(Path(path))


class RecordingExporter:
    def __init__(self):
        self.exports = []

    def supports(self, path: Path) -> bool:
        return Path(path).suffix in (".txt", ".md")

    def export(self, path: Path, todos: Sequence[Todo]) -> None:
        self.exports.append((Path(path), tuple(todos)))


class FakeShell:
    def __init__(self, output: str = "hello\n", error: Exception = None):
        self.output = output
        self.error = error
        self.commands = []

    def run(self, command: str) -> str:
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def deps() -> EditorDeps:
    return EditorDeps(
        repository=MemoryRepository(),
        exporter=RecordingExporter(),
        shell=FakeShell(),
        translate=translate,
    )


@pytest.fixture
def make_ctx(deps):
    """Build a clean context holding the given todos (strings or Todo values)."""

    def _make(*items) -> EditorContext:
        ctx = EditorContext(deps=deps, todo_file=Path("/virtual/todos.json"))
        todos = [item if isinstance(item, Todo) else Todo(item) for item in items]
        ctx.store.reset(todos)
        ctx.refresh_projection()
        ctx.mark_saved()
        return ctx

    return _make


@pytest.fixture
def feed():
    """Send keys to a context: strings are typed char by char, KeyInput passes through."""

    def _feed(ctx: EditorContext, *keys) -> EditorContext:
        for key in keys:
            if isinstance(key, KeyInput):
                handle_key(ctx, key)
            else:
                for ch in key:
                    handle_key(ctx, KeyInput(ch))
        return ctx

    return _feed
