"""Formatted-text builders for the list, status line, command line and help popup."""

from typing import List, Optional, Tuple

from core import Priority, Todo
from core.editor.application.editor_state import EditorContext, Mode
from core.editor.interface.constants import HELP_LINES
from core.editor.interface.tui_display import pad_display

Fragments = List[Tuple[str, str]]

CURSOR_MARKER = "❯ "
NO_MARKER = "  "
NOTE_MARKER = " ›"

PRIORITY_STYLES = {
    Priority.A: "class:priority.a",
    Priority.B: "class:priority.b",
    Priority.C: "class:priority.c",
}

MODE_STYLES = {
    Mode.NORMAL: "class:mode.normal",
    Mode.INSERT: "class:mode.insert",
    Mode.COMMAND: "class:mode.command",
    Mode.VISUAL: "class:mode.visual",
    Mode.SEARCH: "class:mode.search",
    Mode.NOTE_EDIT: "class:mode.note",
    Mode.HELP: "class:mode.help",
}


def row_text(todo: Todo) -> str:
    checkbox = "[✓]" if todo.completed else "[ ]"
    marker = NOTE_MARKER if todo.note is not None else ""
    return f" {checkbox} {todo.text}{marker}"


def row_style(todo: Todo, in_range: bool, is_cursor: bool, visual: bool) -> str:
    if todo.completed:
        parts = ["class:todo.done"]
    else:
        parts = [PRIORITY_STYLES.get(todo.priority, "class:text")]
    if is_cursor:
        parts.append("class:range.cursor" if visual else "class:cursor")
    elif in_range:
        parts.append("class:range")
    return " ".join(parts)


def render_list(ctx: EditorContext, width: int) -> Fragments:
    """One line per projected todo; the cursor row carries the ❯ marker."""
    if not ctx.projection:
        return [("class:text.dim", " " + ctx.t("LIST_EMPTY"))]
    visual = ctx.mode is Mode.VISUAL
    in_range = set(ctx.selection.range_positions()) if visual else set()
    cursor = ctx.selection.cursor
    body_width = max(1, width - len(CURSOR_MARKER))
    fragments: Fragments = []
    for position, store_index in enumerate(ctx.projection):
        todo = ctx.store[store_index]
        is_cursor = position == cursor
        marker = CURSOR_MARKER if is_cursor else NO_MARKER
        style = row_style(todo, position in in_range, is_cursor, visual)
        fragments.append(("class:header" if is_cursor else "", marker))
        fragments.append((style, pad_display(row_text(todo), body_width)))
        fragments.append(("", "\n"))
    return fragments


def priority_counts(todos) -> Tuple[int, int, int]:
    """Open (uncompleted) items per priority letter."""
    counts = {p: 0 for p in Priority}
    for todo in todos:
        if not todo.completed and todo.priority is not None:
            counts[todo.priority] += 1
    return counts[Priority.A], counts[Priority.B], counts[Priority.C]


def render_status(ctx: EditorContext) -> Fragments:
    total = len(ctx.store)
    completed = sum(1 for todo in ctx.store if todo.completed)
    percent = completed * 100 // total if total else 0
    cursor = ctx.selection.cursor
    position = cursor + 1 if cursor is not None else 0
    fragments: Fragments = [
        (MODE_STYLES[ctx.mode], f" {ctx.t('MODE_' + ctx.mode.name)} "),
        ("class:status", " " + ctx.t("STATUS_POSITION", pos=position, total=total, percent=percent) + " "),
        ("class:status", "│ " + ctx.t("STATUS_COMPLETED", count=completed) + " "),
    ]
    a, b, c = priority_counts(ctx.store)
    if a + b + c:
        fragments.append(("class:status", "│ " + ctx.t("STATUS_PRIORITIES", a=a, b=b, c=c) + " "))
    if ctx.query:
        fragments.append(
            ("class:status.results", "│ " + ctx.t("STATUS_RESULTS", count=len(ctx.projection), query=ctx.query))
        )
    return fragments


def command_line_text(ctx: EditorContext) -> Tuple[str, str]:
    """(style, text) for the bottom line: the active buffer or the last message."""
    if ctx.mode is Mode.INSERT:
        prompt = ctx.t("PROMPT_EDIT") if ctx.editing else ctx.t("PROMPT_NEW")
        return "class:cmdline", prompt + ctx.input_buffer
    if ctx.mode is Mode.COMMAND:
        return "class:cmdline", ":" + ctx.command_buffer
    if ctx.mode is Mode.SEARCH:
        return "class:cmdline.search", "/" + ctx.query
    if ctx.mode is Mode.NOTE_EDIT:
        return "class:cmdline", ctx.t("PROMPT_NOTE") + ctx.note_buffer
    return "class:message", ctx.message


def render_command_line(ctx: EditorContext) -> Fragments:
    return [command_line_text(ctx)]


def visible_help_lines(scroll: int, height: int) -> List[str]:
    offset = max(0, min(scroll, len(HELP_LINES) - 1))
    return HELP_LINES[offset:offset + max(1, height)]


def render_help(ctx: EditorContext, height: Optional[int] = None) -> Fragments:
    lines = visible_help_lines(ctx.help_scroll, height if height is not None else len(HELP_LINES))
    return [("class:text", "\n".join(lines))]


__all__ = [
    "render_list",
    "render_status",
    "render_command_line",
    "render_help",
    "command_line_text",
    "priority_counts",
    "row_text",
    "row_style",
    "visible_help_lines",
]
