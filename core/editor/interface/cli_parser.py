"""CLI parser construction for the tuido TUI."""

import argparse
from typing import Any, Mapping


def build_parser(themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuido",
        description="tuido: modal, keyboard-driven todo list editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Press ? inside the editor for key bindings.",
    )
    parser.add_argument(
        "--file",
        "-f",
        dest="file",
        help="todo file to edit (default: $TUIDO_FILE, then todo_file from ~/.tuido_config.yaml, then ~/.tuido.json)",
    )
    parser.add_argument("--theme", choices=list(themes.keys()), default=None, help=f"color palette (default: {default_theme})")
    parser.add_argument("--version", action="store_true", help="print version and exit")
    return parser


__all__ = ["build_parser"]
