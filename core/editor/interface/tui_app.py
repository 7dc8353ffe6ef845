"""Full-screen prompt_toolkit front end for the modal editor."""

import logging
import os
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import DynamicContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from core.editor.application.editor_state import EditorContext, Mode
from core.editor.interface.keys import BACKSPACE, DOWN, ENTER, ESCAPE, UP, KeyInput
from core.editor.interface.mode_controller import handle_key
from core.editor.interface.tui_render import (
    render_command_line,
    render_help,
    render_list,
    render_status,
)
from core.editor.interface.tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("tuido.tui")

_SPECIAL_KEYS = {
    Keys.Enter: ENTER,
    Keys.Escape: ESCAPE,
    Keys.Backspace: BACKSPACE,
    Keys.Up: UP,
    Keys.Down: DOWN,
}

# Rows taken by the frame borders plus the status and command lines.
_CHROME_ROWS = 4


def key_input_from_press(press: KeyPress) -> Optional[KeyInput]:
    """Translate a prompt_toolkit key press into an editor KeyInput.

    Keys the editor has no use for map to None.
    """
    key = press.key
    if key in _SPECIAL_KEYS:
        return KeyInput(_SPECIAL_KEYS[key])
    if key == Keys.ControlR:
        return KeyInput.control("r")
    if isinstance(key, Keys):
        return None
    text = press.data if press.data else key
    if isinstance(text, str) and len(text) == 1 and text.isprintable():
        return KeyInput(text)
    return None


class TodoEditorTUI:
    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(self, ctx: EditorContext, theme: str = DEFAULT_THEME):
        self.ctx = ctx
        self.theme_name = theme
        self.style = self.build_style(theme)

        kb = KeyBindings()

        @kb.add(Keys.Any, eager=True)
        def _(event):
            for press in event.key_sequence:
                key = key_input_from_press(press)
                if key is None:
                    continue
                handle_key(self.ctx, key)
                if self.ctx.quit_requested:
                    event.app.exit(result=0)
                    return

        self.list_control = FormattedTextControl(
            self.get_list_text,
            get_cursor_position=self._cursor_position,
            show_cursor=False,
        )
        self.list_frame = Frame(
            Window(content=self.list_control, wrap_lines=False, always_hide_cursor=True),
            title=lambda: self.ctx.t("LIST_TITLE"),
            style="class:border",
        )
        self.help_frame = Frame(
            Window(content=FormattedTextControl(self.get_help_text), wrap_lines=False, always_hide_cursor=True),
            title=lambda: self.ctx.t("HELP_TITLE"),
            style="class:border",
        )
        self.status_bar = Window(
            content=FormattedTextControl(self.get_status_text),
            height=1,
            style="class:status",
            always_hide_cursor=True,
        )
        self.command_bar = Window(
            content=FormattedTextControl(self.get_command_text),
            height=1,
            always_hide_cursor=True,
        )
        self.body_container = DynamicContainer(self._resolve_body_container)
        root = HSplit([self.body_container, self.status_bar, self.command_bar])

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
        )
        # A lone Escape must not wait for the default 0.5s sequence timeout.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TUIDO_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 30

    def _resolve_body_container(self):
        return self.help_frame if self.ctx.mode is Mode.HELP else self.list_frame

    def _cursor_position(self) -> Point:
        return Point(x=0, y=self.ctx.selection.cursor or 0)

    def get_list_text(self) -> FormattedText:
        return FormattedText(render_list(self.ctx, self.get_terminal_width() - 2))

    def get_help_text(self) -> FormattedText:
        height = max(1, self.get_terminal_height() - _CHROME_ROWS)
        return FormattedText(render_help(self.ctx, height))

    def get_status_text(self) -> FormattedText:
        return FormattedText(render_status(self.ctx))

    def get_command_text(self) -> FormattedText:
        return FormattedText(render_command_line(self.ctx))

    def run(self) -> int:
        logger.debug("Starting TUI with theme %s", self.theme_name)
        result = self.app.run()
        return result or 0


__all__ = ["TodoEditorTUI", "key_input_from_press"]
