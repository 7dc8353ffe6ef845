"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "border": "#4b525a",
        "header": "#ffb347 bold",
        "todo.done": "#6d717a strike",
        "todo.note": "#8d95a0",
        "priority.a": "#e06c75 bold",
        "priority.b": "#e5c07b bold",
        "priority.c": "#61afef bold",
        "cursor": "bg:#3b3b3b bold",
        "range": "bg:#283c50",
        "range.cursor": "bg:#283c50 bold",
        "status": "bg:#1e1e1e #d7dfe6",
        "status.results": "bg:#1e1e1e #56b6c2",
        "mode.normal": "bg:#56b6c2 #000000 bold",
        "mode.insert": "bg:#9ad974 #000000 bold",
        "mode.command": "bg:#e5c07b #000000 bold",
        "mode.visual": "bg:#c678dd #000000 bold",
        "mode.search": "bg:#61afef #000000 bold",
        "mode.note": "bg:#56b6c2 #000000 bold",
        "mode.help": "bg:#d7dfe6 #000000 bold",
        "cmdline": "#d7dfe6",
        "cmdline.search": "#56b6c2",
        "message": "#e5c07b",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "border": "#5a6169",
        "header": "#ffb347 bold",
        "todo.done": "#6f757d strike",
        "todo.note": "#939aa4",
        "priority.a": "#ff6b6b bold",
        "priority.b": "#f0c674 bold",
        "priority.c": "#6cb6ff bold",
        "cursor": "bg:#3d4047 bold",
        "range": "bg:#2a4563",
        "range.cursor": "bg:#2a4563 bold",
        "status": "bg:#202225 #e8eaec",
        "status.results": "bg:#202225 #66d9e8",
        "mode.normal": "bg:#66d9e8 #000000 bold",
        "mode.insert": "bg:#b8f171 #000000 bold",
        "mode.command": "bg:#f0c674 #000000 bold",
        "mode.visual": "bg:#e599f7 #000000 bold",
        "mode.search": "bg:#6cb6ff #000000 bold",
        "mode.note": "bg:#66d9e8 #000000 bold",
        "mode.help": "bg:#e8eaec #000000 bold",
        "cmdline": "#e8eaec",
        "cmdline.search": "#66d9e8",
        "message": "#f0c674",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
