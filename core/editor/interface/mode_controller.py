"""Modal key handling: one entry point, one handler per mode."""

from typing import Callable, Dict, Optional

from core.editor.application import operations as ops
from core.editor.application.editor_state import EditorContext, Mode, PendingChord
from core.editor.interface.command_line import execute_command, request_quit
from core.editor.interface.constants import HELP_LINES
from core.editor.interface.keys import BACKSPACE, DOWN, ENTER, ESCAPE, UP, KeyInput

DIGITS = "0123456789"


def handle_key(ctx: EditorContext, key: KeyInput) -> None:
    """Apply one key press to the editor context.

    A pending chord only survives until the next key: it is taken out of
    the context here and only the Normal handler may set a new one.
    """
    pending, ctx.pending_chord = ctx.pending_chord, None
    if ctx.mode is Mode.NORMAL:
        _handle_normal(ctx, key, pending)
        return
    MODE_HANDLERS[ctx.mode](ctx, key)


def enter_normal(ctx: EditorContext) -> None:
    ctx.mode = Mode.NORMAL
    ctx.input_buffer = ""
    ctx.editing = False
    ctx.command_buffer = ""
    ctx.note_buffer = ""
    ctx.note_target = None
    ctx.repeat_count = 0
    ctx.selection.clear_range()


def _enter_insert(ctx: EditorContext, text: str = "", editing: bool = False) -> None:
    ctx.mode = Mode.INSERT
    ctx.input_buffer = text
    ctx.editing = editing
    ctx.message = ""


def _start_edit(ctx: EditorContext) -> None:
    target = ctx.selection.current_store_index()
    if target is None:
        ctx.notify("NO_TODO_SELECTED")
        return
    _enter_insert(ctx, ctx.store[target].editable_text(), editing=True)


def _open_note_editor(ctx: EditorContext) -> None:
    target = ctx.selection.current_store_index()
    if target is None:
        ctx.notify("NO_TODO_SELECTED")
        return
    ctx.note_target = target
    ctx.note_buffer = ctx.store[target].note or ""
    ctx.mode = Mode.NOTE_EDIT


def _enter_command(ctx: EditorContext) -> None:
    ctx.mode = Mode.COMMAND
    ctx.command_buffer = ""


def _enter_visual(ctx: EditorContext) -> None:
    ctx.selection.start_range()
    ctx.mode = Mode.VISUAL


def _enter_search(ctx: EditorContext) -> None:
    ctx.mode = Mode.SEARCH
    ctx.query = ""
    ctx.refresh_projection()


def _enter_help(ctx: EditorContext) -> None:
    ctx.mode = Mode.HELP
    ctx.help_scroll = 0


# Normal -------------------------------------------------------------------

_NORMAL_ACTIONS: Dict[str, Callable[[EditorContext], object]] = {
    "G": lambda ctx: ctx.selection.jump_last(),
    "$": lambda ctx: ctx.selection.jump_last(),
    "0": lambda ctx: ctx.selection.jump_first(),
    "x": ops.toggle_selected,
    "y": ops.yank_selected,
    "p": ops.paste_clipboard,
    "u": ops.undo,
    ".": ops.repeat_last_action,
    "e": _start_edit,
    "i": _enter_insert,
    "A": _enter_insert,
    "o": _open_note_editor,
    ":": _enter_command,
    "v": _enter_visual,
    "/": _enter_search,
    "?": _enter_help,
    "q": request_quit,
}


def _handle_normal(ctx: EditorContext, key: KeyInput, pending: Optional[PendingChord]) -> None:
    ch = key.char
    if ch is not None and ch in DIGITS and (ch != "0" or ctx.repeat_count > 0):
        ctx.repeat_count = ctx.repeat_count * 10 + int(ch)
        return

    count = max(ctx.repeat_count, 1)
    ctx.repeat_count = 0

    if ch == "j" or key.key == DOWN:
        for _ in range(count):
            ctx.selection.move_next()
        return
    if ch == "k" or key.key == UP:
        for _ in range(count):
            ctx.selection.move_previous()
        return
    if key.ctrl and key.key == "r":
        ops.redo(ctx)
        return
    if ch == "g":
        if pending is PendingChord.G:
            ctx.selection.jump_first()
        else:
            ctx.pending_chord = PendingChord.G
        return
    if ch == "d":
        if pending is PendingChord.D:
            ops.delete_selected(ctx)
        else:
            ctx.pending_chord = PendingChord.D
        return
    action = _NORMAL_ACTIONS.get(ch) if ch is not None else None
    if action is not None:
        action(ctx)


# Insert -------------------------------------------------------------------

def _commit_insert(ctx: EditorContext, leave: bool) -> None:
    if ctx.editing:
        ops.save_edit(ctx, ctx.input_buffer)
        enter_normal(ctx)
        return
    ops.add_todo(ctx, ctx.input_buffer)
    ctx.input_buffer = ""
    if leave:
        enter_normal(ctx)


def _handle_insert(ctx: EditorContext, key: KeyInput) -> None:
    if key.key == ENTER:
        _commit_insert(ctx, leave=False)
    elif key.key == ESCAPE:
        if ctx.input_buffer:
            _commit_insert(ctx, leave=True)
        else:
            enter_normal(ctx)
    elif key.key == BACKSPACE:
        ctx.input_buffer = ctx.input_buffer[:-1]
    elif key.char is not None:
        ctx.input_buffer += key.char


# Command ------------------------------------------------------------------

def _handle_command(ctx: EditorContext, key: KeyInput) -> None:
    if key.key == ENTER:
        raw = ctx.command_buffer
        enter_normal(ctx)
        execute_command(ctx, raw)
    elif key.key == ESCAPE:
        enter_normal(ctx)
    elif key.key == BACKSPACE:
        ctx.command_buffer = ctx.command_buffer[:-1]
    elif key.char is not None:
        ctx.command_buffer += key.char


# Visual -------------------------------------------------------------------

_VISUAL_ACTIONS: Dict[str, Callable[[EditorContext], int]] = {
    "x": ops.toggle_selected,
    "d": ops.delete_selected,
    "y": ops.yank_selected,
}


def _handle_visual(ctx: EditorContext, key: KeyInput) -> None:
    ch = key.char
    if ch == "j" or key.key == DOWN:
        ctx.selection.move_next()
    elif ch == "k" or key.key == UP:
        ctx.selection.move_previous()
    elif key.key == ESCAPE:
        enter_normal(ctx)
    elif ch in _VISUAL_ACTIONS:
        _VISUAL_ACTIONS[ch](ctx)
        enter_normal(ctx)


# Search -------------------------------------------------------------------

def _handle_search(ctx: EditorContext, key: KeyInput) -> None:
    if key.key == ENTER:
        ctx.mode = Mode.NORMAL
    elif key.key == ESCAPE:
        ctx.query = ""
        ctx.refresh_projection()
        enter_normal(ctx)
    elif key.key == BACKSPACE:
        ctx.query = ctx.query[:-1]
        ctx.refresh_projection()
    elif key.char is not None:
        ctx.query += key.char
        ctx.refresh_projection()


# Note edit ----------------------------------------------------------------

def _handle_note_edit(ctx: EditorContext, key: KeyInput) -> None:
    if key.key == ENTER:
        ops.set_note(ctx, ctx.note_target, ctx.note_buffer)
        enter_normal(ctx)
    elif key.key == ESCAPE:
        enter_normal(ctx)
    elif key.key == BACKSPACE:
        ctx.note_buffer = ctx.note_buffer[:-1]
    elif key.char is not None:
        ctx.note_buffer += key.char


# Help ---------------------------------------------------------------------

def _handle_help(ctx: EditorContext, key: KeyInput) -> None:
    ch = key.char
    if key.key == ESCAPE:
        enter_normal(ctx)
    elif ch == "j" or key.key == DOWN:
        ctx.help_scroll = min(ctx.help_scroll + 1, len(HELP_LINES) - 1)
    elif ch == "k" or key.key == UP:
        ctx.help_scroll = max(0, ctx.help_scroll - 1)


MODE_HANDLERS: Dict[Mode, Callable[[EditorContext, KeyInput], None]] = {
    Mode.NORMAL: lambda ctx, key: _handle_normal(ctx, key, None),
    Mode.INSERT: _handle_insert,
    Mode.COMMAND: _handle_command,
    Mode.VISUAL: _handle_visual,
    Mode.SEARCH: _handle_search,
    Mode.NOTE_EDIT: _handle_note_edit,
    Mode.HELP: _handle_help,
}

_unhandled = set(Mode) - set(MODE_HANDLERS)
if _unhandled:
    raise RuntimeError(f"modes without a key handler: {sorted(m.name for m in _unhandled)}")


__all__ = ["handle_key", "enter_normal", "MODE_HANDLERS"]
