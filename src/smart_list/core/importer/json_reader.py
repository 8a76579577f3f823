"""Parse smart list JSON documents into domain models, and dump them back."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from smart_list.config import DEFAULT_ICON_SET_ID
from smart_list.core.tree.navigation import find_duplicate_ids
from smart_list.models.config import (
    COLLAPSE_DEFAULTS,
    DETAIL_MODES,
    INTENSITIES,
    NUMBERING_FORMATS,
    PROGRESS_POSITIONS,
    REVEAL_MODES,
    ListConfig,
    ListDocument,
)
from smart_list.models.item import IconRef, ListItem


def _choice(raw: dict[str, Any], key: str, allowed: tuple[str, ...], default: str | None) -> Any:
    value = raw.get(key, default)
    if value is not None and value not in allowed:
        msg = f"Invalid {key!r}: {value!r} (expected one of {', '.join(allowed)})"
        raise ValueError(msg)
    return value


def _statuses(raw: Any) -> frozenset[str]:
    if raw is None:
        return frozenset()
    if not isinstance(raw, list) or not all(isinstance(s, str) for s in raw):
        msg = f"Invalid 'filterByStatuses': {raw!r} (expected a list of status ids)"
        raise ValueError(msg)
    return frozenset(raw)


def parse_icon_ref(raw: Any) -> IconRef | None:
    """Parse ``{"setId", "iconId"}``; anything else counts as no icon."""
    if not isinstance(raw, dict) or "setId" not in raw or "iconId" not in raw:
        return None
    return IconRef(set_id=str(raw["setId"]), icon_id=str(raw["iconId"]))


def parse_config(raw: dict[str, Any]) -> ListConfig:
    """Parse a camelCase config object.

    Raises:
        ValueError: If a closed-set field holds an unknown value.
    """
    return ListConfig(
        icon_set_id=raw.get("iconSetId", DEFAULT_ICON_SET_ID),
        collapse_default=_choice(raw, "collapseDefault", COLLAPSE_DEFAULTS, "all-expanded"),
        reveal_mode=_choice(raw, "revealMode", REVEAL_MODES, "all-at-once"),
        show_numbering=bool(raw.get("showNumbering", False)),
        numbering_format=_choice(raw, "numberingFormat", NUMBERING_FORMATS, "1."),
        child_numbering_format=_choice(raw, "childNumberingFormat", NUMBERING_FORMATS, None),
        secondary_icon_set_id=raw.get("secondaryIconSetId"),
        filter_by_statuses=_statuses(raw.get("filterByStatuses")),
        group_by_status=bool(raw.get("groupByStatus", False)),
        conditional_formatting=bool(raw.get("conditionalFormatting", False)),
        intensity=_choice(raw, "conditionalFormatIntensity", INTENSITIES, "subtle"),
        progress_summary=_choice(raw, "progressSummary", PROGRESS_POSITIONS, "hidden"),
        detail_mode=_choice(raw, "detailMode", DETAIL_MODES, "none"),
    )


def parse_item(raw: Any, *, path: str = "items") -> ListItem:
    """Parse one item and its children recursively.

    Raises:
        ValueError: If the item is not an object or has no string id.
    """
    if not isinstance(raw, dict):
        msg = f"{path}: expected an object, got {type(raw).__name__}"
        raise ValueError(msg)
    item_id = raw.get("id")
    if not isinstance(item_id, str) or not item_id:
        msg = f"{path}: missing item id"
        raise ValueError(msg)
    children = raw.get("children") or []
    return ListItem(
        id=item_id,
        text=raw.get("text", ""),
        is_header=bool(raw.get("isHeader", False)),
        primary_icon=parse_icon_ref(raw.get("primaryIcon")),
        secondary_icon=parse_icon_ref(raw.get("secondaryIcon")),
        description=raw.get("description"),
        detail=raw.get("detail"),
        visible=raw.get("visible"),
        collapsed=raw.get("collapsed"),
        children=tuple(
            parse_item(child, path=f"{path}[{item_id}].children[{i}]")
            for i, child in enumerate(children)
        ),
    )


def parse_list_document(data: dict[str, Any], *, title: str = "") -> ListDocument:
    """Parse a list document (``{"title", "config", "items"}``).

    Args:
        data: Raw document data (as loaded from JSON).
        title: Fallback title when the document has none.

    Returns:
        The parsed ListDocument.

    Raises:
        ValueError: If ``config`` is not an object, ``items`` is not a list,
            or any item or config field is malformed.
    """
    raw_config = data.get("config", {})
    if not isinstance(raw_config, dict):
        msg = f"'config': expected an object, got {type(raw_config).__name__}"
        raise ValueError(msg)
    raw_items = data.get("items", [])
    if not isinstance(raw_items, list):
        msg = f"'items': expected a list, got {type(raw_items).__name__}"
        raise ValueError(msg)

    items = tuple(parse_item(raw, path=f"items[{i}]") for i, raw in enumerate(raw_items))
    duplicates = find_duplicate_ids(items)
    if duplicates:
        logger.warning("Duplicate item ids {} in list {!r}", list(duplicates), title)
    return ListDocument(
        title=data.get("title", title),
        config=parse_config(raw_config),
        items=items,
    )


def dump_icon_ref(ref: IconRef) -> dict[str, str]:
    return {"setId": ref.set_id, "iconId": ref.icon_id}


def dump_item(item: ListItem) -> dict[str, Any]:
    """Serialize one item, omitting unset optional fields."""
    out: dict[str, Any] = {"id": item.id, "text": item.text}
    if item.is_header:
        out["isHeader"] = True
    if item.primary_icon:
        out["primaryIcon"] = dump_icon_ref(item.primary_icon)
    if item.secondary_icon:
        out["secondaryIcon"] = dump_icon_ref(item.secondary_icon)
    for key, value in (
        ("description", item.description),
        ("detail", item.detail),
        ("visible", item.visible),
        ("collapsed", item.collapsed),
    ):
        if value is not None:
            out[key] = value
    if item.children:
        out["children"] = [dump_item(child) for child in item.children]
    return out


def dump_config(config: ListConfig) -> dict[str, Any]:
    out: dict[str, Any] = {
        "iconSetId": config.icon_set_id,
        "collapseDefault": config.collapse_default,
        "revealMode": config.reveal_mode,
        "showNumbering": config.show_numbering,
        "numberingFormat": config.numbering_format,
        "groupByStatus": config.group_by_status,
        "conditionalFormatting": config.conditional_formatting,
        "conditionalFormatIntensity": config.intensity,
        "progressSummary": config.progress_summary,
        "detailMode": config.detail_mode,
    }
    if config.child_numbering_format:
        out["childNumberingFormat"] = config.child_numbering_format
    if config.secondary_icon_set_id:
        out["secondaryIconSetId"] = config.secondary_icon_set_id
    if config.filter_by_statuses:
        out["filterByStatuses"] = sorted(config.filter_by_statuses)
    return out


def dump_list_document(doc: ListDocument) -> dict[str, Any]:
    return {
        "title": doc.title,
        "config": dump_config(doc.config),
        "items": [dump_item(item) for item in doc.items],
    }


def load_list_file(path: Path) -> ListDocument:
    """Read and parse a list document; the file stem is the fallback title."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"{path}: expected a JSON object"
        raise ValueError(msg)
    return parse_list_document(data, title=path.stem)


def save_list_file(path: Path, doc: ListDocument) -> None:
    """Write a list document as indented JSON."""
    path.write_text(
        json.dumps(dump_list_document(doc), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
