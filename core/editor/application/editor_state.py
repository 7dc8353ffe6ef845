"""Editor context: every piece of interaction state, threaded explicitly."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from application.ports import ShellRunner, TodoExporter, TodoRepository
from core import Todo
from core.editor.application.search_filter import filter_indices
from core.editor.application.selection import SelectionModel
from core.editor.application.snapshot_history import Snapshot, SnapshotHistory
from core.editor.application.todo_store import TodoStore

Translate = Callable[..., str]


class Mode(Enum):
    NORMAL = "NORMAL"
    INSERT = "INSERT"
    COMMAND = "COMMAND"
    VISUAL = "VISUAL"
    SEARCH = "SEARCH"
    NOTE_EDIT = "NOTE EDIT"
    HELP = "HELP"


class PendingChord(Enum):
    """First key of a two-key Normal-mode command awaiting its second key."""

    G = "g"
    D = "d"


class RepeatableAction(Enum):
    TOGGLE = "toggle"
    DELETE = "delete"


@dataclass
class EditorDeps:
    repository: TodoRepository
    exporter: TodoExporter
    shell: ShellRunner
    translate: Translate


@dataclass
class EditorContext:
    deps: EditorDeps
    todo_file: Path
    store: TodoStore = field(default_factory=TodoStore)
    history: SnapshotHistory = field(default_factory=SnapshotHistory)
    selection: SelectionModel = field(default_factory=SelectionModel)
    query: str = ""
    mode: Mode = Mode.NORMAL
    repeat_count: int = 0
    pending_chord: Optional[PendingChord] = None
    input_buffer: str = ""
    editing: bool = False  # INSERT rewrites the todo under the cursor
    command_buffer: str = ""
    note_buffer: str = ""
    note_target: Optional[int] = None  # store index
    help_scroll: int = 0
    clipboard: List[Todo] = field(default_factory=list)
    last_action: Optional[RepeatableAction] = None
    saved_todos: Tuple[Todo, ...] = ()
    message: str = ""
    quit_requested: bool = False

    @property
    def projection(self) -> List[int]:
        return self.selection.projection

    @property
    def is_dirty(self) -> bool:
        return self.store.snapshot() != self.saved_todos

    def t(self, key: str, **kwargs) -> str:
        return self.deps.translate(key, **kwargs)

    def notify(self, key: str, **kwargs) -> None:
        self.message = self.t(key, **kwargs)

    def refresh_projection(self) -> None:
        self.selection.set_projection(filter_indices(self.query, self.store))

    def selected_positions(self) -> List[int]:
        return self.selection.positions(self.mode is Mode.VISUAL)

    def capture(self) -> None:
        self.history.capture(self.store.snapshot(), self.selection.current_store_index())

    def restore(self, snapshot: Snapshot) -> None:
        self.store.reset(snapshot.todos)
        self.refresh_projection()
        self.selection.place_at_store_index(snapshot.cursor)

    def mark_saved(self) -> None:
        self.saved_todos = self.store.snapshot()


__all__ = [
    "EditorContext",
    "EditorDeps",
    "Mode",
    "PendingChord",
    "RepeatableAction",
    "Translate",
]
