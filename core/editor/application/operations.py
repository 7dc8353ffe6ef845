"""List mutations. Each one captures a snapshot before touching the store."""

from typing import List, Optional, Sequence

from core import Todo, priority_sort_key, todo_from_input
from core.editor.application.editor_state import EditorContext, RepeatableAction


def _selected_store_indices(ctx: EditorContext) -> List[int]:
    return ctx.selection.store_indices(ctx.selected_positions())


def _count_message(ctx: EditorContext, single_key: str, plural_key: str, count: int) -> None:
    if count == 1:
        ctx.notify(single_key)
    else:
        ctx.notify(plural_key, count=count)


def toggle_selected(ctx: EditorContext) -> int:
    indices = _selected_store_indices(ctx)
    if not indices:
        return 0
    ctx.capture()
    for idx in indices:
        ctx.store.replace(idx, ctx.store[idx].toggled())
    ctx.last_action = RepeatableAction.TOGGLE
    _count_message(ctx, "TODO_TOGGLED", "TODOS_TOGGLED", len(indices))
    return len(indices)


def delete_selected(ctx: EditorContext) -> int:
    positions = ctx.selected_positions()
    indices = ctx.selection.store_indices(positions)
    if not indices:
        return 0
    ctx.clipboard = [ctx.store[i] for i in indices]
    ctx.capture()
    ctx.store.remove_many(indices)
    ctx.refresh_projection()
    ctx.selection.repair_after_delete(positions[0])
    ctx.last_action = RepeatableAction.DELETE
    _count_message(ctx, "TODO_DELETED", "TODOS_DELETED", len(indices))
    return len(indices)


def yank_selected(ctx: EditorContext) -> int:
    indices = _selected_store_indices(ctx)
    if not indices:
        return 0
    ctx.clipboard = [ctx.store[i] for i in indices]
    _count_message(ctx, "TODO_YANKED", "TODOS_YANKED", len(indices))
    return len(indices)


def paste_clipboard(ctx: EditorContext) -> int:
    if not ctx.clipboard:
        ctx.notify("NOTHING_TO_PASTE")
        return 0
    ctx.capture()
    current = ctx.selection.current_store_index()
    insert_at = current + 1 if current is not None else len(ctx.store)
    ctx.store.insert_block(insert_at, ctx.clipboard)
    ctx.refresh_projection()
    ctx.notify("PASTED", count=len(ctx.clipboard))
    return len(ctx.clipboard)


def add_todo(ctx: EditorContext, raw: str) -> bool:
    todo = todo_from_input(raw)
    if not todo.text:
        ctx.notify("EMPTY_NOT_ADDED")
        return False
    ctx.capture()
    new_index = ctx.store.append(todo)
    ctx.refresh_projection()
    ctx.selection.place_at_store_index(new_index)
    ctx.notify("TODO_ADDED")
    return True


def save_edit(ctx: EditorContext, raw: str) -> bool:
    """Rewrite the todo under the cursor; blank text deletes it instead."""
    position = ctx.selection.cursor
    target = ctx.selection.current_store_index()
    if target is None:
        return False
    updated = ctx.store[target].with_text(raw)
    ctx.capture()
    if not updated.text:
        ctx.store.remove(target)
        ctx.refresh_projection()
        ctx.selection.repair_after_delete(position or 0)
        ctx.notify("TODO_DELETED_EMPTY")
        return True
    ctx.store.replace(target, updated)
    ctx.refresh_projection()
    ctx.selection.place_at_store_index(target)
    ctx.notify("TODO_UPDATED")
    return True


def set_note(ctx: EditorContext, target: Optional[int], raw: str) -> bool:
    if target is None or not 0 <= target < len(ctx.store):
        return False
    ctx.capture()
    note = raw if raw.strip() else None
    ctx.store.replace(target, ctx.store[target].with_note(note))
    ctx.notify("NOTE_SAVED")
    return True


def undo(ctx: EditorContext) -> bool:
    snapshot = ctx.history.undo(ctx.store.snapshot(), ctx.selection.current_store_index())
    if snapshot is None:
        ctx.notify("NOTHING_TO_UNDO")
        return False
    ctx.restore(snapshot)
    ctx.notify("UNDO_DONE")
    return True


def redo(ctx: EditorContext) -> bool:
    snapshot = ctx.history.redo()
    if snapshot is None:
        ctx.notify("NOTHING_TO_REDO")
        return False
    ctx.restore(snapshot)
    ctx.notify("REDO_DONE")
    return True


def repeat_last_action(ctx: EditorContext) -> int:
    """Replay the last toggle/delete against the current cursor or range."""
    action = ctx.last_action
    if action is RepeatableAction.TOGGLE:
        return toggle_selected(ctx)
    if action is RepeatableAction.DELETE:
        return delete_selected(ctx)
    ctx.notify("NOTHING_TO_REPEAT")
    return 0


def clear_completed(ctx: EditorContext) -> int:
    ctx.capture()
    removed = ctx.store.retain(lambda t: not t.completed)
    ctx.refresh_projection()
    ctx.notify("CLEARED", count=removed)
    return removed


def sort_by_completion(ctx: EditorContext) -> None:
    ctx.capture()
    ctx.store.stable_sort(key=lambda t: t.completed)
    ctx.refresh_projection()
    ctx.notify("SORTED_COMPLETION")


def sort_by_priority(ctx: EditorContext) -> None:
    ctx.capture()
    ctx.store.stable_sort(key=lambda t: (priority_sort_key(t.priority), t.completed))
    ctx.refresh_projection()
    ctx.notify("SORTED_PRIORITY")


def replace_all(ctx: EditorContext, todos: Sequence[Todo]) -> None:
    ctx.capture()
    ctx.store.reset(todos)
    ctx.refresh_projection()


__all__ = [
    "toggle_selected",
    "delete_selected",
    "yank_selected",
    "paste_clipboard",
    "add_todo",
    "save_edit",
    "set_note",
    "undo",
    "redo",
    "repeat_last_action",
    "clear_completed",
    "sort_by_completion",
    "sort_by_priority",
    "replace_all",
]
