#!/usr/bin/env python3
"""
tuido: modal todo list editor.

Wires config, logging and the infrastructure adapters into an editor
context, loads the data file and hands control to the TUI.
"""

import logging
import sys
from functools import partial
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Optional

from config import get_log_file, get_todo_file, get_user_lang, get_user_theme
from core.editor.application.editor_state import EditorContext, EditorDeps
from core.editor.application.file_ops import load_initial
from core.editor.interface.cli_parser import build_parser
from core.editor.interface.i18n import translate
from core.editor.interface.tui_app import TodoEditorTUI
from core.editor.interface.tui_themes import DEFAULT_THEME, THEMES
from infrastructure.exporters import FileExporter
from infrastructure.json_repository import JsonTodoRepository
from infrastructure.shell_runner import SubprocessShellRunner

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file=None) -> None:
    """Attach a file handler only when a log file is configured.

    The TUI owns the terminal, so nothing is ever written to stderr.
    """
    if log_file is None:
        logging.getLogger("tuido").addHandler(logging.NullHandler())
        return
    logging.basicConfig(filename=str(log_file), level=logging.DEBUG, format=LOG_FORMAT)


def build_deps(lang: Optional[str] = None) -> EditorDeps:
    return EditorDeps(
        repository=JsonTodoRepository(),
        exporter=FileExporter(),
        shell=SubprocessShellRunner(),
        translate=partial(translate, lang=lang),
    )


def build_context(todo_file, deps: EditorDeps) -> EditorContext:
    ctx = EditorContext(deps=deps, todo_file=todo_file)
    load_initial(ctx)
    return ctx


def resolve_theme(requested: Optional[str]) -> str:
    for candidate in (requested, get_user_theme()):
        if candidate in THEMES:
            return candidate
    return DEFAULT_THEME


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser(THEMES, DEFAULT_THEME)
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("tuido"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    configure_logging(get_log_file())
    todo_file = get_todo_file(args.file)
    ctx = build_context(todo_file, build_deps(get_user_lang() or None))
    return TodoEditorTUI(ctx, theme=resolve_theme(args.theme)).run()


if __name__ == "__main__":
    sys.exit(main())
