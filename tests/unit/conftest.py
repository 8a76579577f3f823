"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from smart_list.models.config import ListConfig
from smart_list.models.item import ListItem
from tests.unit.fakes import FakeIconRegistry, header, make_item

ROADMAP_DOC = {
    "title": "Q3 Roadmap",
    "config": {
        "iconSetId": "task-status",
        "collapseDefault": "all-expanded",
        "revealMode": "one-by-one-focus",
        "showNumbering": True,
        "progressSummary": "below",
        "detailMode": "inline",
    },
    "items": [
        {"id": "h1", "text": "Platform", "isHeader": True},
        {
            "id": "a",
            "text": "Migrate storage",
            "primaryIcon": {"setId": "task-status", "iconId": "done"},
            "detail": "Moved all buckets.",
            "children": [
                {
                    "id": "a1",
                    "text": "Copy data",
                    "primaryIcon": {"setId": "task-status", "iconId": "done"},
                },
            ],
        },
        {
            "id": "b",
            "text": "Rate limiting",
            "primaryIcon": {"setId": "task-status", "iconId": "todo"},
        },
        {"id": "h2", "text": "Product", "isHeader": True},
        {"id": "c", "text": "Pricing experiment", "visible": False},
    ],
}


@pytest.fixture
def registry() -> FakeIconRegistry:
    return FakeIconRegistry()


@pytest.fixture
def config() -> ListConfig:
    return ListConfig(icon_set_id="status")


@pytest.fixture
def roadmap_items() -> tuple[ListItem, ...]:
    """Two sections, nested children, and one hidden item without icon."""
    return (
        header("h1", "Platform"),
        make_item(
            "a",
            status="done",
            children=[make_item("a1", status="done"), make_item("a2", status="in-progress")],
        ),
        make_item("b", status="todo"),
        header("h2", "Product"),
        make_item("c", status="in-progress", children=[make_item("c1", status="done")]),
        make_item("d", visible=False),
    )


@pytest.fixture
def list_dir(tmp_path: Path) -> Path:
    """Return a directory holding roadmap.json."""
    directory = tmp_path / "lists"
    directory.mkdir()
    (directory / "roadmap.json").write_text(json.dumps(ROADMAP_DOC))
    return directory
