"""Editor actions that talk to the filesystem or the shell."""

import logging
from pathlib import Path
from typing import Optional

from core import ShellCommandError, TodoFormatError, TodoStorageError
from core.editor.application.editor_state import EditorContext
from core.editor.application.operations import replace_all

logger = logging.getLogger("tuido.commands")


def load_initial(ctx: EditorContext) -> bool:
    """Load the default file at startup; any failure leaves a clean empty list."""
    try:
        todos = ctx.deps.repository.load(ctx.todo_file)
    except TodoFormatError as exc:
        logger.warning("Ignoring unreadable todo file: %s", exc)
        todos = None
        ctx.notify("OPEN_INVALID", path=ctx.todo_file)
    except TodoStorageError as exc:
        logger.debug("No todo file loaded: %s", exc)
        todos = None
    ctx.store.reset(todos or [])
    ctx.history.clear()
    ctx.refresh_projection()
    ctx.selection.jump_first()
    ctx.mark_saved()
    if todos is not None:
        ctx.notify("LOADED_DEFAULT")
    return todos is not None


def save_todos(ctx: EditorContext, path: Optional[Path] = None) -> bool:
    """Write the list to path (default file when omitted).

    On failure the in-memory list is kept and the dirty flag stays set.
    """
    target = Path(path) if path is not None else ctx.todo_file
    try:
        ctx.deps.repository.save(target, ctx.store.snapshot())
    except TodoStorageError as exc:
        logger.warning("Save failed: %s", exc)
        if path is None:
            ctx.notify("SAVE_FAILED", error=exc.message)
        else:
            ctx.notify("SAVE_TO_FAILED", path=target, error=exc.message)
        return False
    ctx.mark_saved()
    ctx.notify("SAVED", path=target)
    return True


def open_todos(ctx: EditorContext, path: Path) -> bool:
    try:
        todos = ctx.deps.repository.load(Path(path))
    except TodoFormatError as exc:
        logger.warning("Open failed: %s", exc)
        ctx.notify("OPEN_INVALID", path=path)
        return False
    except TodoStorageError as exc:
        logger.warning("Open failed: %s", exc)
        ctx.notify("OPEN_FAILED", path=path, error=exc.message)
        return False
    replace_all(ctx, todos)
    ctx.notify("OPENED", path=path)
    return True


def export_todos(ctx: EditorContext, path: Path) -> bool:
    exporter = ctx.deps.exporter
    if not exporter.supports(Path(path)):
        ctx.notify("EXPORT_UNSUPPORTED", path=path)
        return False
    try:
        exporter.export(Path(path), ctx.store.snapshot())
    except TodoStorageError as exc:
        logger.warning("Export failed: %s", exc)
        ctx.notify("EXPORT_FAILED", error=exc.message)
        return False
    ctx.notify("EXPORTED", path=path)
    return True


def run_shell(ctx: EditorContext, command: str) -> bool:
    """Run command synchronously and put its output on the status line."""
    try:
        output = ctx.deps.shell.run(command)
    except ShellCommandError as exc:
        ctx.notify("SHELL_FAILED", error=exc)
        return False
    ctx.notify("SHELL_OUTPUT", output=output.strip())
    return True


__all__ = ["load_initial", "save_todos", "open_todos", "export_todos", "run_shell"]
