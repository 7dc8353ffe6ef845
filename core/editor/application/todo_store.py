"""Ordered todo collection with primitive mutations only."""

from typing import Callable, Iterable, Iterator, List, Sequence, Tuple

from core import Todo


class TodoStore:
    def __init__(self, todos: Iterable[Todo] = ()):
        self._todos: List[Todo] = list(todos)

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self._todos)

    def __getitem__(self, index: int) -> Todo:
        return self._todos[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, TodoStore):
            return self._todos == other._todos
        return NotImplemented

    def snapshot(self) -> Tuple[Todo, ...]:
        return tuple(self._todos)

    def append(self, todo: Todo) -> int:
        self._todos.append(todo)
        return len(self._todos) - 1

    def insert_block(self, index: int, todos: Sequence[Todo]) -> None:
        """Insert todos contiguously at index, keeping their order."""
        index = max(0, min(index, len(self._todos)))
        self._todos[index:index] = list(todos)

    def replace(self, index: int, todo: Todo) -> None:
        self._todos[index] = todo

    def remove(self, index: int) -> Todo:
        return self._todos.pop(index)

    def remove_many(self, indices: Iterable[int]) -> List[Todo]:
        """Remove every index; returns the removed todos in store order."""
        removed: List[Todo] = []
        for idx in sorted(set(indices), reverse=True):
            if 0 <= idx < len(self._todos):
                removed.append(self._todos.pop(idx))
        removed.reverse()
        return removed

    def retain(self, keep: Callable[[Todo], bool]) -> int:
        """Keep only todos matching keep; returns how many were dropped."""
        before = len(self._todos)
        self._todos = [t for t in self._todos if keep(t)]
        return before - len(self._todos)

    def stable_sort(self, key: Callable[[Todo], object]) -> None:
        self._todos.sort(key=key)

    def reset(self, todos: Iterable[Todo]) -> None:
        self._todos = list(todos)


__all__ = ["TodoStore"]
