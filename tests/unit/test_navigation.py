"""Tests for tree navigation and section helpers."""

from smart_list.core.tree.navigation import (
    count_visibility,
    find_duplicate_ids,
    find_item,
    iter_items,
)
from smart_list.core.tree.sections import section_index_by_id, split_sections
from smart_list.models.item import ListItem
from tests.unit.fakes import header, make_item


def test_iter_items_is_pre_order_with_depth(roadmap_items: tuple[ListItem, ...]) -> None:
    walked = [(item.id, depth) for item, depth in iter_items(roadmap_items)]
    assert walked == [
        ("h1", 0),
        ("a", 0),
        ("a1", 1),
        ("a2", 1),
        ("b", 0),
        ("h2", 0),
        ("c", 0),
        ("c1", 1),
        ("d", 0),
    ]


def test_find_item(roadmap_items: tuple[ListItem, ...]) -> None:
    found = find_item(roadmap_items, "c1")
    assert found is not None
    assert found.text == "C1"
    assert find_item(roadmap_items, "zzz") is None


def test_find_duplicate_ids() -> None:
    tree = (make_item("a", children=[make_item("b")]), make_item("b"), make_item("c"))
    assert find_duplicate_ids(tree) == ("b",)


def test_count_visibility_counts_every_node_on_its_own_flag(
    roadmap_items: tuple[ListItem, ...],
) -> None:
    assert count_visibility(roadmap_items) == (6, 7)

    tree = (make_item("p", visible=False, children=[make_item("q")]),)
    assert count_visibility(tree) == (1, 2)


def test_split_sections_skips_empty_runs() -> None:
    tree = [header("h0"), header("h1"), make_item("a"), make_item("b"), header("h2"), make_item("c")]

    sections = split_sections(tree)

    assert [[item.id for item in s] for s in sections] == [["a", "b"], ["c"]]


def test_sections_without_headers() -> None:
    assert len(split_sections([make_item("a"), make_item("b")])) == 1
    assert split_sections([header("h")]) == []


def test_section_index_matches_split() -> None:
    tree = [header("h0"), make_item("a"), header("h1"), header("h2"), make_item("b")]

    index = section_index_by_id(tree)

    assert index == {"h0": 0, "a": 0, "h1": 1, "h2": 1, "b": 1}
