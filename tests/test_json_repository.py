import json
from pathlib import Path

import pytest

from core import Priority, Todo, TodoFormatError, TodoStorageError
from infrastructure.json_repository import JsonTodoRepository, parse_todos, todo_from_dict


def test_roundtrip_preserves_every_field(tmp_path: Path):
    repo = JsonTodoRepository()
    todos = [
        Todo("plain"),
        Todo("done", completed=True),
        Todo("urgent", priority=Priority.A, note="call back"),
        Todo("ünïcode ✓", priority=Priority.C, note=""),
    ]
    path = tmp_path / "todos.json"
    repo.save(path, todos)
    assert repo.load(path) == todos


def test_file_is_pretty_printed_utf8(tmp_path: Path):
    path = tmp_path / "todos.json"
    JsonTodoRepository().save(path, [Todo("café")])
    content = path.read_text(encoding="utf-8")
    assert "café" in content
    assert '\n  {\n    "text"' in content
    assert json.loads(content) == [{"text": "café", "completed": False, "priority": None, "note": None}]


def test_optional_fields_may_be_missing():
    todos = parse_todos('[{"text": "a", "completed": false}]')
    assert todos == [Todo("a")]


def test_unknown_priority_loads_as_absent():
    assert todo_from_dict({"text": "a", "completed": True, "priority": "Z"}).priority is None


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"text": "a"}',
        '[{"completed": false}]',
        '[{"text": "a", "completed": "yes"}]',
        "[1]",
    ],
)
def test_malformed_content_raises_format_error(tmp_path: Path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(TodoFormatError) as exc:
        JsonTodoRepository().load(path)
    assert exc.value.path == path


def test_missing_file_raises_storage_error(tmp_path: Path):
    with pytest.raises(TodoStorageError) as exc:
        JsonTodoRepository().load(tmp_path / "missing.json")
    assert not isinstance(exc.value, TodoFormatError)


def test_save_into_missing_directory_raises_storage_error(tmp_path: Path):
    with pytest.raises(TodoStorageError):
        JsonTodoRepository().save(tmp_path / "nope" / "todos.json", [Todo("a")])


def test_undecodable_bytes_raise_format_error(tmp_path: Path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"text": "\xff\xfe", "completed": false}]')
    with pytest.raises(TodoFormatError) as exc:
        JsonTodoRepository().load(path)
    assert exc.value.path == path
