"""Tests for MCP tool core functions."""

import json
from pathlib import Path

from smart_list.core.importer.json_reader import load_list_file
from smart_list.mcp.server import (
    ListStore,
    smart_list_edit,
    smart_list_list_documents,
    smart_list_progress,
    smart_list_render,
    smart_list_step,
    smart_list_toggle_collapse,
    smart_list_toggle_detail,
)


def test_list_documents_reports_counts(list_dir: Path) -> None:
    result = smart_list_list_documents(ListStore(list_dir))

    assert result["count"] == 1
    (doc,) = result["documents"]
    assert doc == {"name": "roadmap", "title": "Q3 Roadmap", "items": 4, "visible": 3}


def test_list_documents_skips_malformed(list_dir: Path) -> None:
    (list_dir / "broken.json").write_text(json.dumps({"items": [{"text": "no id"}]}))

    result = smart_list_list_documents(ListStore(list_dir))

    assert [d["name"] for d in result["documents"]] == ["roadmap"]


def test_list_documents_missing_directory(tmp_path: Path) -> None:
    assert smart_list_list_documents(ListStore(tmp_path / "none"))["count"] == 0


def test_render_markdown_and_rows(list_dir: Path) -> None:
    store = ListStore(list_dir)

    editing = smart_list_render(store, name="roadmap", editing=True)
    assert "~~Pricing experiment~~" in editing["content"]

    rows = smart_list_render(store, name="roadmap", output_format="json")["rows"]
    assert [row["item_id"] for row in rows] == ["h1", "a", "a1", "b", "h2"]


def test_unknown_list_returns_error(list_dir: Path) -> None:
    result = smart_list_render(ListStore(list_dir), name="nope")
    assert result == {"error": "List 'nope' not found."}


def test_progress(list_dir: Path) -> None:
    result = smart_list_progress(ListStore(list_dir), name="roadmap")

    assert result["total"] == 4
    assert result["summary"] == "Progress: To Do 1 · Done 2 · No status 1 (4 items)"


def test_step_walks_playback(list_dir: Path) -> None:
    store = ListStore(list_dir)

    first = smart_list_step(store, name="roadmap")
    assert (first["step"], first["max_step"], first["focused_id"]) == (1, 2, "a1")

    smart_list_step(store, name="roadmap")
    last = smart_list_step(store, name="roadmap")
    assert last["step"] == 2
    assert last["focused_id"] == "b"

    back = smart_list_step(store, name="roadmap", direction="prev")
    assert back["step"] == 1


def test_step_rejects_unknown_direction(list_dir: Path) -> None:
    result = smart_list_step(ListStore(list_dir), name="roadmap", direction="up")
    assert "error" in result


def test_toggle_collapse_and_detail(list_dir: Path) -> None:
    store = ListStore(list_dir)

    collapsed = smart_list_toggle_collapse(store, name="roadmap", item_id="a")
    assert collapsed["collapsed"] is True
    assert "Copy data" not in collapsed["content"]

    detail = smart_list_toggle_detail(store, name="roadmap", item_id="a")
    assert detail["expanded_id"] == "a"
    assert "> Moved all buckets." in detail["content"]


def test_edit_updates_session_without_saving(list_dir: Path) -> None:
    store = ListStore(list_dir)

    result = smart_list_edit(store, name="roadmap", action="set-text", item_id="b", value="Throttling")

    assert result["success"] is True
    assert result["changed"] is True
    assert "Throttling" in result["content"]
    assert load_list_file(list_dir / "roadmap.json").items[2].text == "Rate limiting"


def test_edit_with_save_writes_file(list_dir: Path) -> None:
    store = ListStore(list_dir)

    smart_list_edit(store, name="roadmap", action="show-all", save=True)

    assert load_list_file(list_dir / "roadmap.json").items[4].visible is True


def test_edit_no_change_and_errors(list_dir: Path) -> None:
    store = ListStore(list_dir)

    unchanged = smart_list_edit(store, name="roadmap", action="hide", item_id="zzz")
    assert unchanged["success"] is True
    assert unchanged["changed"] is False

    failed = smart_list_edit(store, name="roadmap", action="move", item_id="a")
    assert failed["success"] is False
    assert "target id" in failed["error"]


def test_edit_keeps_presentation_mode_for_later_tools(list_dir: Path) -> None:
    store = ListStore(list_dir)

    edited = smart_list_edit(store, name="roadmap", action="set-text", item_id="b", value="X")
    assert "~~Pricing experiment~~" in edited["content"]

    collapsed = smart_list_toggle_collapse(store, name="roadmap", item_id="a")
    assert "~~" not in collapsed["content"]
    detail = smart_list_toggle_detail(store, name="roadmap", item_id="a")
    assert "Pricing experiment" not in detail["content"]


def test_null_config_or_items_return_errors(list_dir: Path) -> None:
    (list_dir / "no-config.json").write_text(json.dumps({"config": None, "items": []}))
    (list_dir / "no-items.json").write_text(json.dumps({"items": None}))
    store = ListStore(list_dir)

    no_config = smart_list_render(store, name="no-config")
    no_items = smart_list_render(store, name="no-items")

    assert "'config'" in no_config["error"]
    assert "'items'" in no_items["error"]
    assert smart_list_list_documents(store)["count"] == 1


def test_names_outside_list_dir_are_rejected(list_dir: Path) -> None:
    outside = list_dir.parent / "outside.json"
    outside.write_text((list_dir / "roadmap.json").read_text())
    store = ListStore(list_dir)

    for name in ("../outside", "sub/roadmap", "..", ""):
        result = smart_list_render(store, name=name)
        assert result == {"error": f"Invalid list name '{name}'"}

    saved = smart_list_edit(store, name="../outside", action="show-all", save=True)
    assert "error" in saved
    assert load_list_file(outside).items[4].visible is False
