from core.editor.application.selection import SelectionModel


def test_cursor_absent_iff_projection_empty():
    sel = SelectionModel()
    assert sel.cursor is None
    sel.set_projection([0, 1])
    assert sel.cursor == 0
    sel.set_projection([])
    assert sel.cursor is None


def test_moves_wrap_around():
    sel = SelectionModel([0, 1, 2])
    sel.move_previous()
    assert sel.cursor == 2
    sel.move_next()
    assert sel.cursor == 0


def test_moves_on_empty_projection_are_noops():
    sel = SelectionModel()
    sel.move_next()
    sel.move_previous()
    sel.jump_last()
    assert sel.cursor is None


def test_projection_shrink_clamps_cursor():
    sel = SelectionModel([0, 1, 2, 3])
    sel.jump_last()
    sel.set_projection([1, 3])
    assert sel.cursor == 1


def test_range_is_symmetric_in_anchor_and_cursor():
    forward = SelectionModel([0, 2, 4, 6])
    forward.cursor = 1
    forward.start_range()
    forward.cursor = 3

    backward = SelectionModel([0, 2, 4, 6])
    backward.cursor = 3
    backward.start_range()
    backward.cursor = 1

    assert forward.range_positions() == backward.range_positions() == [1, 2, 3]
    assert forward.store_indices(forward.range_positions()) == [2, 4, 6]


def test_positions_outside_visual_is_cursor_only():
    sel = SelectionModel([5, 7])
    sel.cursor = 1
    sel.start_range()
    assert sel.positions(visual=False) == [1]
    assert sel.positions(visual=True) == [1]


def test_hidden_store_index_maps_to_next_visible_row():
    sel = SelectionModel([1, 4, 6])
    assert sel.position_of_store_index(4) == 1
    assert sel.position_of_store_index(5) == 2
    assert sel.position_of_store_index(9) == 2
    assert sel.position_of_store_index(None) == 0


def test_repair_after_delete_clamps_to_last_row():
    sel = SelectionModel([0, 1])
    sel.repair_after_delete(5)
    assert sel.cursor == 1
    sel.set_projection([])
    sel.repair_after_delete(0)
    assert sel.cursor is None
