from pathlib import Path

import pytest

from core import ShellCommandError, Todo
from core.editor.application.editor_state import Mode
from core.editor.application.operations import undo
from core.editor.interface.command_line import COMMANDS, execute_command


def _texts(ctx):
    return [t.text for t in ctx.store]


class TestQuit:
    def test_quit_when_clean(self, make_ctx):
        ctx = make_ctx("a")
        execute_command(ctx, "q")
        assert ctx.quit_requested

    @pytest.mark.parametrize("word", ["q", "quit", "QUIT"])
    def test_quit_refused_when_dirty(self, make_ctx, word):
        ctx = make_ctx("a")
        ctx.store.append(Todo("b"))
        execute_command(ctx, word)
        assert not ctx.quit_requested
        assert ctx.message == "Error: unsaved changes. Use :q! to quit without saving"

    def test_force_quit(self, make_ctx):
        ctx = make_ctx("a")
        ctx.store.append(Todo("b"))
        execute_command(ctx, "q!")
        assert ctx.quit_requested


class TestWrite:
    def test_w_saves_default_file_and_clears_dirty(self, make_ctx):
        ctx = make_ctx("a")
        ctx.store.append(Todo("b"))
        execute_command(ctx, "w")
        repo = ctx.deps.repository
        assert repo.files[ctx.todo_file] == [Todo("a"), Todo("b")]
        assert not ctx.is_dirty
        assert ctx.message == f"Saved to {ctx.todo_file}"

    def test_failed_save_keeps_dirty(self, make_ctx):
        ctx = make_ctx("a")
        ctx.store.append(Todo("b"))
        ctx.deps.repository.fail_save = True
        execute_command(ctx, "w")
        assert ctx.is_dirty
        assert ctx.message == "Error saving: Permission denied (check permissions)"

    def test_wq_quits_even_if_save_fails(self, make_ctx, caplog):
        ctx = make_ctx("a")
        ctx.deps.repository.fail_save = True
        with caplog.at_level("WARNING", logger="tuido.commands"):
            execute_command(ctx, "wq")
        assert ctx.quit_requested
        assert "failed save" in caplog.text

    def test_write_path_keeps_argument_case_and_quotes(self, make_ctx):
        ctx = make_ctx("a")
        execute_command(ctx, 'WRITE "/tmp/My Todos.json"')
        assert Path("/tmp/My Todos.json") in ctx.deps.repository.files
        assert ctx.message == "Saved to /tmp/My Todos.json"

    def test_plain_write_uses_default_file(self, make_ctx):
        ctx = make_ctx("a")
        execute_command(ctx, "write")
        assert ctx.deps.repository.saves == [ctx.todo_file]

    def test_write_does_not_record_history(self, make_ctx):
        ctx = make_ctx("a")
        execute_command(ctx, "w")
        assert len(ctx.history) == 0


class TestListCommands:
    def test_clear(self, make_ctx):
        ctx = make_ctx(Todo("a", True), Todo("b"))
        execute_command(ctx, "clear")
        assert _texts(ctx) == ["b"]
        assert ctx.message == "Removed 1 completed todos"

    def test_sort_and_sort_priority(self, make_ctx):
        ctx = make_ctx(Todo("done", True), Todo("open"))
        execute_command(ctx, "sort")
        assert _texts(ctx) == ["open", "done"]
        execute_command(ctx, "sort Priority")
        assert ctx.message == "Sorted by priority"

    def test_sort_with_unknown_argument(self, make_ctx):
        ctx = make_ctx("b", "a")
        execute_command(ctx, "sort alpha")
        assert ctx.message == "Unknown command: sort alpha"
        assert len(ctx.history) == 0

    def test_help_opens_help_mode(self, make_ctx):
        ctx = make_ctx()
        ctx.help_scroll = 7
        execute_command(ctx, "help")
        assert ctx.mode is Mode.HELP
        assert ctx.help_scroll == 0


class TestOpen:
    def test_open_replaces_list_and_is_undoable(self, make_ctx):
        ctx = make_ctx("old")
        ctx.deps.repository.files[Path("/data/other.json")] = [Todo("new")]
        execute_command(ctx, "open /data/other.json")
        assert _texts(ctx) == ["new"]
        assert ctx.message == "Loaded from /data/other.json"
        execute_command(ctx, "q")
        assert not ctx.quit_requested  # differs from the last saved list
        undo(ctx)
        assert _texts(ctx) == ["old"]

    def test_open_invalid_file_leaves_state(self, make_ctx):
        ctx = make_ctx("old")
        ctx.deps.repository.broken.add(Path("/data/bad.json"))
        execute_command(ctx, "open /data/bad.json")
        assert _texts(ctx) == ["old"]
        assert ctx.message == "Invalid file format in /data/bad.json"
        assert len(ctx.history) == 0

    def test_open_missing_file(self, make_ctx):
        ctx = make_ctx("old")
        execute_command(ctx, "open /nope.json")
        assert ctx.message == "Error reading /nope.json: No such file or directory"

    def test_open_without_argument(self, make_ctx):
        ctx = make_ctx()
        execute_command(ctx, "open")
        assert ctx.message == "Usage: :open <filename> (use quotes for spaces)"


class TestExport:
    def test_export_markdown(self, make_ctx):
        ctx = make_ctx("a")
        execute_command(ctx, "export out.md")
        assert ctx.deps.exporter.exports == [(Path("out.md"), (Todo("a"),))]
        assert ctx.message == "Exported to out.md"

    def test_export_unsupported_suffix(self, make_ctx):
        ctx = make_ctx("a")
        execute_command(ctx, "export out.pdf")
        assert ctx.deps.exporter.exports == []
        assert ctx.message == "Unsupported format: out.pdf (use .txt or .md)"

    def test_export_usage(self, make_ctx):
        ctx = make_ctx("a")
        execute_command(ctx, "export")
        assert ctx.message.startswith("Usage: :export")


class TestShell:
    @pytest.mark.parametrize("line", ["!echo hi", "! echo hi", "  !echo hi  "])
    def test_shell_output_goes_to_status(self, make_ctx, line):
        ctx = make_ctx()
        execute_command(ctx, line)
        assert ctx.deps.shell.commands == ["echo hi"]
        assert ctx.message == "> hello"

    def test_shell_failure(self, make_ctx):
        ctx = make_ctx()
        ctx.deps.shell.error = ShellCommandError("sh: not found")
        execute_command(ctx, "!oops")
        assert ctx.message == "Error: sh: not found"

    def test_bare_bang_shows_usage(self, make_ctx):
        ctx = make_ctx()
        execute_command(ctx, "!")
        assert ctx.message == "Usage: :!<command>"
        assert ctx.deps.shell.commands == []


def test_unknown_command_changes_nothing(make_ctx):
    ctx = make_ctx("a")
    execute_command(ctx, "frobnicate now")
    assert ctx.message == "Unknown command: frobnicate now"
    assert _texts(ctx) == ["a"]
    assert len(ctx.history) == 0


def test_arguments_on_argless_command_are_rejected(make_ctx):
    ctx = make_ctx(Todo("a", True))
    execute_command(ctx, "clear all")
    assert ctx.message == "Unknown command: clear all"
    assert _texts(ctx) == ["a"]


def test_unbalanced_quotes(make_ctx):
    ctx = make_ctx()
    execute_command(ctx, 'write "unterminated')
    assert ctx.message.startswith("Error:")
    assert ctx.deps.repository.saves == []


def test_command_table_covers_grammar():
    assert set(COMMANDS) == {"q", "quit", "q!", "w", "wq", "clear", "sort", "write", "open", "export", "help"}
