"""Tests for the accordion detail controller."""

from smart_list.core.state.accordion import prune_detail, toggle_detail
from tests.unit.fakes import make_item

ITEMS = (
    make_item("a", detail="first"),
    make_item("b", detail="second", children=[make_item("b1", detail="nested")]),
    make_item("c"),
)


def test_opening_second_detail_closes_first() -> None:
    expanded = toggle_detail(None, "a", items=ITEMS, detail_mode="inline")
    expanded = toggle_detail(expanded, "b", items=ITEMS, detail_mode="inline")
    assert expanded == "b"


def test_toggling_open_detail_closes_it() -> None:
    assert toggle_detail("a", "a", items=ITEMS, detail_mode="inline") is None


def test_nested_detail_can_open() -> None:
    assert toggle_detail("a", "b1", items=ITEMS, detail_mode="inline") == "b1"


def test_items_without_detail_are_ignored() -> None:
    assert toggle_detail("a", "c", items=ITEMS, detail_mode="inline") == "a"
    assert toggle_detail("a", "missing", items=ITEMS, detail_mode="inline") == "a"


def test_detail_mode_none_disables_toggle() -> None:
    assert toggle_detail(None, "a", items=ITEMS, detail_mode="none") is None


def test_open_pane_closes_after_its_detail_is_removed() -> None:
    stripped = (make_item("a"), make_item("c"))
    assert toggle_detail("a", "a", items=stripped, detail_mode="inline") is None
    assert toggle_detail("gone", "gone", items=stripped, detail_mode="inline") is None


def test_prune_detail_drops_stale_ids() -> None:
    assert prune_detail("a", items=ITEMS, detail_mode="inline") == "a"
    assert prune_detail("a", items=(make_item("a"),), detail_mode="inline") is None
    assert prune_detail("a", items=(), detail_mode="inline") is None
    assert prune_detail(None, items=ITEMS, detail_mode="inline") is None
