import pytest

from core import Priority, Todo, normalize_priority, parse_priority, priority_sort_key, todo_from_input


@pytest.mark.parametrize(
    "raw,priority,text",
    [
        ("(A) urgent task", Priority.A, "urgent task"),
        ("(b)   lowercase letter", Priority.B, "lowercase letter"),
        ("  (C) padded  ", Priority.C, "padded"),
        ("(D) not a priority", None, "(D) not a priority"),
        ("plain text", None, "plain text"),
        ("(A)", Priority.A, ""),
    ],
)
def test_parse_priority(raw, priority, text):
    assert parse_priority(raw) == (priority, text)


def test_todo_from_input_starts_incomplete_without_note():
    todo = todo_from_input("(A) urgent task")
    assert todo == Todo("urgent task", completed=False, priority=Priority.A, note=None)


def test_editable_text_includes_priority_prefix():
    assert Todo("ship", priority=Priority.B).editable_text() == "(B) ship"
    assert Todo("ship").editable_text() == "ship"


def test_with_text_reparses_priority_and_keeps_other_fields():
    todo = Todo("old", completed=True, priority=Priority.A, note="n")
    updated = todo.with_text("new text")
    assert updated == Todo("new text", completed=True, priority=None, note="n")


def test_toggled_returns_new_value():
    todo = Todo("a")
    assert todo.toggled().completed is True
    assert todo.completed is False


def test_normalize_priority_rejects_unknown_tokens():
    assert normalize_priority(" b ") == "B"
    assert normalize_priority("Z") == ""
    assert normalize_priority(None) == ""
    assert Priority.from_string("c") is Priority.C
    assert Priority.from_string("high") is None


def test_priority_sort_key_orders_a_b_c_then_none():
    ordered = sorted([None, Priority.C, Priority.A, None, Priority.B], key=priority_sort_key)
    assert ordered == [Priority.A, Priority.B, Priority.C, None, None]
