"""Ex-style command line: parse the buffer and dispatch to editor actions."""

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List

from core.editor.application import operations as ops
from core.editor.application.editor_state import EditorContext, Mode
from core.editor.application.file_ops import export_todos, open_todos, run_shell, save_todos

logger = logging.getLogger("tuido.commands")

CommandHandler = Callable[[EditorContext, List[str]], None]


@dataclass(frozen=True)
class CommandSpec:
    handler: CommandHandler
    takes_args: bool = False


def request_quit(ctx: EditorContext) -> None:
    if ctx.is_dirty:
        ctx.notify("UNSAVED_CHANGES")
        return
    ctx.quit_requested = True


def _cmd_quit(ctx: EditorContext, args: List[str]) -> None:
    request_quit(ctx)


def _cmd_force_quit(ctx: EditorContext, args: List[str]) -> None:
    ctx.quit_requested = True


def _cmd_write_default(ctx: EditorContext, args: List[str]) -> None:
    save_todos(ctx)


def _cmd_write_quit(ctx: EditorContext, args: List[str]) -> None:
    if not save_todos(ctx):
        logger.warning("Quitting after failed save of %s", ctx.todo_file)
    ctx.quit_requested = True


def _cmd_clear(ctx: EditorContext, args: List[str]) -> None:
    ops.clear_completed(ctx)


def _cmd_sort(ctx: EditorContext, args: List[str]) -> None:
    if not args:
        ops.sort_by_completion(ctx)
    elif len(args) == 1 and args[0].lower() == "priority":
        ops.sort_by_priority(ctx)
    else:
        ctx.notify("UNKNOWN_COMMAND", command=" ".join(["sort", *args]))


def _cmd_write(ctx: EditorContext, args: List[str]) -> None:
    save_todos(ctx, Path(args[0]).expanduser() if args else None)


def _cmd_open(ctx: EditorContext, args: List[str]) -> None:
    if not args:
        ctx.notify("OPEN_USAGE")
        return
    open_todos(ctx, Path(args[0]).expanduser())


def _cmd_export(ctx: EditorContext, args: List[str]) -> None:
    if not args:
        ctx.notify("EXPORT_USAGE")
        return
    export_todos(ctx, Path(args[0]).expanduser())


def _cmd_help(ctx: EditorContext, args: List[str]) -> None:
    ctx.mode = Mode.HELP
    ctx.help_scroll = 0


COMMANDS: Dict[str, CommandSpec] = {
    "q": CommandSpec(_cmd_quit),
    "quit": CommandSpec(_cmd_quit),
    "q!": CommandSpec(_cmd_force_quit),
    "w": CommandSpec(_cmd_write_default),
    "wq": CommandSpec(_cmd_write_quit),
    "clear": CommandSpec(_cmd_clear),
    "sort": CommandSpec(_cmd_sort, takes_args=True),
    "write": CommandSpec(_cmd_write, takes_args=True),
    "open": CommandSpec(_cmd_open, takes_args=True),
    "export": CommandSpec(_cmd_export, takes_args=True),
    "help": CommandSpec(_cmd_help),
}


def execute_command(ctx: EditorContext, raw: str) -> None:
    """Run one command line (without the leading ':')."""
    line = raw.strip()
    if not line:
        return
    if line.startswith("!"):
        shell_text = line[1:].strip()
        if not shell_text:
            ctx.notify("SHELL_USAGE")
            return
        run_shell(ctx, shell_text)
        return
    try:
        tokens = shlex.split(line)
    except ValueError as exc:
        ctx.notify("BAD_QUOTING", error=exc)
        return
    if not tokens:
        return
    word, args = tokens[0].lower(), tokens[1:]
    command = COMMANDS.get(word)
    if command is None or (args and not command.takes_args):
        ctx.notify("UNKNOWN_COMMAND", command=line)
        return
    logger.debug("Executing :%s %s", word, args)
    command.handler(ctx, args)


__all__ = ["CommandSpec", "COMMANDS", "execute_command", "request_quit"]
