from pathlib import Path
from typing import List, Protocol, Sequence

from core import Todo


class TodoRepository(Protocol):
    def load(self, path: Path) -> List[Todo]:
        ...

    def save(self, path: Path, todos: Sequence[Todo]) -> None:
        ...


class TodoExporter(Protocol):
    def supports(self, path: Path) -> bool:
        ...

    def export(self, path: Path, todos: Sequence[Todo]) -> None:
        ...


class ShellRunner(Protocol):
    def run(self, command: str) -> str:
        ...
