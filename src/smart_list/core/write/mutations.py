"""Mutation engine: pure rewrites that return a new item tree.

Every operation addresses nodes by id through a tree-wide search. Subtrees that
do not contain the target are reused as-is, so the previous tree stays a valid
snapshot and unchanged branches compare by identity. An unknown id returns the
input tree itself.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace

from loguru import logger

from smart_list.models.item import IconRef, ListItem

Items = tuple[ListItem, ...]


def _map_items(items: Sequence[ListItem], fn: Callable[[ListItem], ListItem]) -> Items:
    """Apply fn to every node bottom-up, reusing nodes fn leaves unchanged."""
    changed = False
    result: list[ListItem] = []
    for item in items:
        new = item
        if item.children:
            children = _map_items(item.children, fn)
            if children is not item.children:
                new = replace(item, children=children)
        new = fn(new)
        changed = changed or new is not item
        result.append(new)
    if not changed and isinstance(items, tuple):
        return items
    return tuple(result)


def _update_item(items: Sequence[ListItem], item_id: str, **changes: object) -> Items:
    def update(item: ListItem) -> ListItem:
        return replace(item, **changes) if item.id == item_id else item

    result = _map_items(items, update)
    if result is items:
        logger.debug("No item {} to update", item_id)
    return result


def set_text(items: Sequence[ListItem], item_id: str, text: str) -> Items:
    """Replace a node's text."""
    return _update_item(items, item_id, text=text)


def set_primary_icon(items: Sequence[ListItem], item_id: str, ref: IconRef | None) -> Items:
    """Replace a node's primary icon (its status)."""
    return _update_item(items, item_id, primary_icon=ref)


def set_secondary_icon(items: Sequence[ListItem], item_id: str, ref: IconRef | None) -> Items:
    """Replace a node's secondary icon."""
    return _update_item(items, item_id, secondary_icon=ref)


def set_visible(items: Sequence[ListItem], item_id: str, visible: bool) -> Items:
    """Show or hide one node in presentation mode."""
    return _update_item(items, item_id, visible=visible)


def toggle_visible(items: Sequence[ListItem], item_id: str) -> Items:
    """Flip a node between hidden and shown."""

    def toggle(item: ListItem) -> ListItem:
        if item.id != item_id:
            return item
        return replace(item, visible=item.visible is False)

    return _map_items(items, toggle)


def set_all_visible(items: Sequence[ListItem], visible: bool) -> Items:
    """Set visibility on every non-header node."""

    def update(item: ListItem) -> ListItem:
        if item.is_header or item.visible is visible:
            return item
        return replace(item, visible=visible)

    return _map_items(items, update)


def show_only_status(items: Sequence[ListItem], icon_id: str) -> Items:
    """Show exactly the non-header nodes whose status is icon_id."""

    def update(item: ListItem) -> ListItem:
        if item.is_header:
            return item
        visible = item.status == icon_id
        return item if item.visible is visible else replace(item, visible=visible)

    return _map_items(items, update)


def insert_after(items: Sequence[ListItem], item_id: str, new_item: ListItem) -> Items:
    """Insert new_item as the sibling right after item_id."""
    result: list[ListItem] = []
    found = False
    for item in items:
        if not found and item.children:
            children = insert_after(item.children, item_id, new_item)
            if children is not item.children:
                item = replace(item, children=children)
                found = True
        result.append(item)
        if not found and item.id == item_id:
            result.append(new_item)
            found = True
    if not found:
        return items if isinstance(items, tuple) else tuple(items)
    return tuple(result)


def delete_if_empty(items: Sequence[ListItem], item_id: str) -> Items:
    """Remove a node whose text is empty; non-empty nodes are kept."""
    result: list[ListItem] = []
    changed = False
    for item in items:
        if item.id == item_id and item.text == "":
            changed = True
            continue
        if item.children:
            children = delete_if_empty(item.children, item_id)
            if children is not item.children:
                item = replace(item, children=children)
                changed = True
        result.append(item)
    if not changed:
        return items if isinstance(items, tuple) else tuple(items)
    return tuple(result)


def reorder_top_level(items: Sequence[ListItem], from_id: str, to_id: str) -> Items:
    """Move a top-level node to the position of another top-level node.

    Nested nodes are not reorderable; either id missing from the top level
    makes this a no-op.
    """
    ids = [item.id for item in items]
    if from_id not in ids or to_id not in ids or from_id == to_id:
        logger.debug("Reorder {} -> {} ignored", from_id, to_id)
        return items if isinstance(items, tuple) else tuple(items)
    result = list(items)
    moved = result.pop(ids.index(from_id))
    result.insert(ids.index(to_id), moved)
    return tuple(result)
