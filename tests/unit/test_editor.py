"""Tests for editing-mode interactions."""

import pytest

from smart_list.core.tree.pipeline import render_sequence
from smart_list.core.write.editor import ListEditor
from smart_list.models.config import ListConfig
from smart_list.models.item import FlatListItem, IconRef, ListItem
from tests.unit.fakes import RecordingHandler, make_item

TREE = (
    make_item("a", children=[make_item("a1"), make_item("a2", text="")]),
    make_item("b"),
)


def _flat(items: tuple[ListItem, ...]) -> tuple[FlatListItem, ...]:
    return render_sequence(items, ListConfig(icon_set_id="status"), is_editing=True)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def editor(handler: RecordingHandler) -> ListEditor:
    return ListEditor(TREE, on_data_change=handler, new_id=lambda: "new")


def test_enter_inserts_sibling_and_focuses_it(
    editor: ListEditor, handler: RecordingHandler
) -> None:
    assert editor.handle_key("a1", "Enter", _flat(editor.items)) is True

    assert [c.id for c in editor.items[0].children] == ["a1", "new", "a2"]
    assert editor.focus_id == "new"
    assert handler.changes == [editor.items]


def test_backspace_on_empty_item_deletes_and_focuses_previous(editor: ListEditor) -> None:
    assert editor.handle_key("a2", "Backspace", _flat(editor.items)) is True

    assert [c.id for c in editor.items[0].children] == ["a1"]
    assert editor.focus_id == "a1"


def test_backspace_skips_children_of_collapsed_previous_row(handler: RecordingHandler) -> None:
    tree = (
        make_item("a", collapsed=True, children=[make_item("a1")]),
        make_item("b", text=""),
    )
    editor = ListEditor(tree, on_data_change=handler)
    flat = _flat(tree)
    assert [f.item.id for f in flat] == ["a", "b"]

    assert editor.handle_key("b", "Backspace", flat) is True

    assert [item.id for item in editor.items] == ["a"]
    assert editor.focus_id == "a"


def test_backspace_on_first_row_leaves_focus(handler: RecordingHandler) -> None:
    tree = (make_item("a", text=""), make_item("b"))
    editor = ListEditor(tree, on_data_change=handler)

    assert editor.handle_key("a", "Backspace", _flat(tree)) is True

    assert [item.id for item in editor.items] == ["b"]
    assert editor.focus_id is None


def test_backspace_on_non_empty_item_is_not_consumed(
    editor: ListEditor, handler: RecordingHandler
) -> None:
    assert editor.handle_key("b", "Backspace", _flat(editor.items)) is False
    assert editor.items is TREE
    assert handler.changes == []


def test_arrow_keys_move_focus(editor: ListEditor) -> None:
    flat = _flat(editor.items)
    editor.handle_key("a1", "ArrowDown", flat)
    assert editor.focus_id == "a2"
    editor.handle_key("a1", "ArrowUp", flat)
    assert editor.focus_id == "a"
    assert editor.handle_key("a", "ArrowUp", flat) is False


def test_slash_opens_quick_pick_and_icon_choice_closes_it(editor: ListEditor) -> None:
    editor.handle_key("b", "/", _flat(editor.items))
    assert editor.quick_pick_id == "b"

    editor.change_icon("b", IconRef("status", "done"))

    assert editor.quick_pick_id is None
    assert editor.items[1].status == "done"


def test_escape_clears_focus(editor: ListEditor) -> None:
    editor.focus_id = "a"
    editor.handle_key("a", "Escape", _flat(editor.items))
    assert editor.focus_id is None


def test_rejected_change_keeps_tree() -> None:
    handler = RecordingHandler(accept=False)
    editor = ListEditor(TREE, on_data_change=handler)

    assert editor.change_text("b", "changed") is False

    assert editor.items is TREE
    assert len(handler.changes) == 1


@pytest.mark.parametrize("kwargs", [{"is_editing": False}, {"on_data_change": None}])
def test_editor_inert_when_disabled(kwargs: dict[str, object]) -> None:
    editor = ListEditor(TREE, **{"on_data_change": RecordingHandler(), **kwargs})  # type: ignore[arg-type]
    assert editor.handle_key("a1", "Enter", _flat(TREE)) is False
    assert editor.change_text("b", "x") is False
    assert editor.items is TREE


def test_drag_end_reorders_top_level_only(editor: ListEditor, handler: RecordingHandler) -> None:
    assert editor.drag_end("a1", "b") is False
    assert handler.changes == []

    assert editor.drag_end("b", "a") is True
    assert [i.id for i in editor.items] == ["b", "a"]


def test_visibility_toolbar(editor: ListEditor) -> None:
    editor.toggle_visibility("b")
    assert editor.items[1].visible is False

    editor.set_all_visibility(True)
    assert editor.items[1].visible is True

    editor.change_icon("b", IconRef("status", "todo"))
    editor.show_only_status("todo")
    assert editor.items[0].visible is False
    assert editor.items[1].visible is True


def test_icon_click_toggles_quick_pick(editor: ListEditor) -> None:
    editor.open_icon_pick("a")
    assert editor.quick_pick_id == "a"
    editor.open_icon_pick("a")
    assert editor.quick_pick_id is None
